"""
Template context shared by every page (layout, header, meta tags).
"""
from . import content


def site(request):
    return {
        'site_name': content.SITE_NAME,
        'site_brand': content.SITE_BRAND,
        'site_description': content.SITE_DESCRIPTION,
        'nav_links': content.NAV_LINKS,
    }
