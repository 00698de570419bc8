"""
Site Page URLs

Public pages (no auth required).
"""
from django.urls import path
from . import views

app_name = 'pages'

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('style-guide/', views.StyleGuideView.as_view(), name='style-guide'),
    path('healthz', views.HealthCheckView.as_view(), name='health'),
]
