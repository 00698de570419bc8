"""
Site Page Views

Public pages, no authentication required.
"""
from django.views.generic import TemplateView
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from . import content


class HomeView(TemplateView):
    """
    Single-page site: hero, services, about and contact sections.

    GET /
    """

    template_name = 'pages/home.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'hero': content.HERO,
            'services': [
                {**service, 'icon_path': content.ICONS[service['icon']]}
                for service in content.SERVICES
            ],
            'about_intro': content.ABOUT_INTRO,
            'trust_signals': content.TRUST_SIGNALS,
            'check_icon_path': content.ICONS['check'],
            'lighthouse_score': content.LIGHTHOUSE_SCORE,
            'lighthouse_label': content.lighthouse_label(),
            'contact_intro': content.CONTACT_INTRO,
            'contact_form': content.CONTACT_FORM,
        })
        return context


class StyleGuideView(TemplateView):
    """
    Reference page for buttons, cards and the fade-up animation.

    GET /style-guide/
    """

    template_name = 'pages/style_guide.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['button_variants'] = [
            'default', 'destructive', 'ghost', 'link', 'outline', 'secondary',
        ]
        return context


class HealthCheckView(APIView):
    """
    Liveness probe for the load balancer.

    GET /healthz
    """

    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'ok'})
