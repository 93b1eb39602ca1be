"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import RainReportView

urlpatterns = [
    path("isitraining", RainReportView.as_view(), name="isitraining"),
]
