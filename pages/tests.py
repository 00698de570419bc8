"""
Tests for the public site pages
"""
import re

import pytest
from rest_framework import status

from pages import content


@pytest.fixture
def home_html(client):
    response = client.get('/')
    assert response.status_code == status.HTTP_200_OK
    return response.content.decode()


class TestLayout:
    """Layout shell shared by every page."""

    def test_html_lang_and_meta(self, home_html):
        assert '<html lang="en">' in home_html
        assert f'<title>{content.SITE_NAME}</title>' in home_html
        assert 'Professional web development services in the Cayman Islands.' in home_html

    def test_skip_link_targets_main(self, home_html):
        assert 'href="#main-content"' in home_html
        assert '<main id="main-content">' in home_html

    def test_assets_are_linked(self, home_html):
        assert 'pages/css/site.css' in home_html
        assert 'pages/js/site.js' in home_html

    def test_sections_in_order(self, home_html):
        positions = [home_html.index(f'id="{section}"') for section in
                     ('hero', 'services', 'about', 'contact')]
        assert positions == sorted(positions)


class TestHeader:
    """Brand, desktop navigation and the mobile menu."""

    def test_brand_and_navigation(self, home_html):
        assert '<a href="/" class="site-header__brand">Jon Kumar</a>' in home_html
        assert 'aria-label="Main navigation"' in home_html
        for link in content.NAV_LINKS:
            assert f'href="{link["href"]}"' in home_html

    def test_menu_button_accessibility(self, home_html):
        button = re.search(r'<button[^>]*data-menu-button[^>]*>', home_html).group(0)
        assert 'aria-expanded="false"' in button
        assert 'aria-controls="mobile-menu"' in button
        assert 'aria-label="Open menu"' in button

    def test_mobile_menu_is_hidden_dialog(self, home_html):
        menu = re.search(r'<nav id="mobile-menu"[^>]*>', home_html).group(0)
        assert 'role="dialog"' in menu
        assert 'aria-modal="true"' in menu
        assert 'hidden' in menu


class TestHero:
    """Hero headline and calls to action."""

    def test_single_h1(self, home_html):
        assert home_html.count('<h1') == 1
        assert 'Expertly Delivered' in home_html

    def test_ctas(self, home_html):
        assert 'href="#contact" class="button button--default button--lg">Let&#x27;s Talk</a>' in home_html
        assert 'href="#services" class="button button--outline button--lg">See Services</a>' in home_html

    def test_gradient_is_decorative(self, home_html):
        assert '<div class="hero__gradient" aria-hidden="true"></div>' in home_html


class TestServices:
    """Services grid."""

    def test_three_cards_with_copy(self, home_html):
        assert home_html.count('data-testid="service-card"') == 3
        for service in content.SERVICES:
            assert service['title'] in home_html

    def test_section_labelled_by_heading(self, home_html):
        assert 'aria-labelledby="services-heading"' in home_html
        assert '<h2 id="services-heading" class="section__heading">Services</h2>' in home_html

    def test_icons_are_decorative(self, home_html):
        services = home_html[home_html.index('id="services"'):home_html.index('id="about"')]
        assert services.count('<svg fill="none" viewBox="0 0 24 24" stroke="currentColor" stroke-width="2" aria-hidden="true">') == 3


class TestAbout:
    """About section, trust signals and the Lighthouse badge."""

    def test_section_labelled_by_heading(self, home_html):
        assert 'aria-labelledby="about-heading"' in home_html
        assert '<h2 id="about-heading" class="section__heading">About</h2>' in home_html

    def test_trust_signals_have_decorative_checks(self, home_html):
        assert home_html.count('class="trust-signal__check" aria-hidden="true"') == len(content.TRUST_SIGNALS)

    def test_lighthouse_badge_label(self, home_html):
        assert 'role="img" aria-label="Lighthouse Performance Score: 100 out of 100"' in home_html

    def test_lighthouse_label_helper(self):
        assert content.lighthouse_label(95) == 'Lighthouse Performance Score: 95 out of 100'


class TestContactSection:
    """Contact section and form markup."""

    def test_heading_and_intro(self, home_html):
        assert 'aria-labelledby="contact-heading"' in home_html
        assert 'No pressure. No jargon.' in home_html

    def test_labelled_fields(self, home_html):
        for field in ('name', 'email', 'message'):
            assert f'<label for="contact-{field}"' in home_html
            assert f'aria-describedby="{field}-error"' in home_html
            assert f'<p id="{field}-error" class="field__error sr-only" aria-live="polite">' in home_html

    def test_honeypot_is_hidden(self, home_html):
        assert '<div class="visually-hidden-field" aria-hidden="true">' in home_html
        assert '<input type="text" id="website" name="website" tabindex="-1" autocomplete="off">' in home_html

    def test_form_configuration(self, home_html):
        assert 'data-endpoint="/api/contact"' in home_html
        assert 'data-error-name="Please enter your name"' in home_html
        assert '<form class="contact-form__form" novalidate>' in home_html
        assert 'Send Message' in home_html

    def test_result_regions(self, home_html):
        assert 'role="status" aria-live="polite" data-state="success" hidden' in home_html
        assert 'role="alert" aria-live="assertive" data-state="error" hidden' in home_html
        assert 'Try Again' in home_html


class TestOtherPages:
    """Style guide and health check."""

    def test_style_guide(self, client):
        response = client.get('/style-guide/')

        assert response.status_code == status.HTTP_200_OK
        html = response.content.decode()
        assert 'Style Guide' in html
        assert 'I fade up!' in html
        assert 'button--destructive' in html

    def test_health_check(self, api_client):
        response = api_client.get('/healthz')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok'}
