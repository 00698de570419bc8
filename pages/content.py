"""
Site Content

All copy shown on the public pages. Templates read these through the
views and the `site` context processor, never inline.
"""

SITE_NAME = 'Jon Kumar Web Solutions'
SITE_BRAND = 'Jon Kumar'
SITE_DESCRIPTION = (
    'Professional web development services in the Cayman Islands. '
    'Custom websites, modern designs, and reliable support for your business.'
)

NAV_LINKS = [
    {'label': 'Services', 'href': '#services'},
    {'label': 'About', 'href': '#about'},
    {'label': 'Contact', 'href': '#contact'},
]

HERO = {
    'headline': 'Modern Web Solutions,',
    'headline_accent': 'Expertly Delivered',
    'subtext': (
        'From sleek designs to robust back-end systems, I build and deliver '
        'custom web solutions that drive business growth and user engagement.'
    ),
    'primary_cta': {'label': "Let's Talk", 'href': '#contact'},
    'secondary_cta': {'label': 'See Services', 'href': '#services'},
}

# SVG path data (24x24 viewBox, stroked)
ICONS = {
    'search': 'M21 21l-4.35-4.35M11 19a8 8 0 100-16 8 8 0 000 16z',
    'award': (
        'M12 15a7 7 0 100-14 7 7 0 000 14zM8.21 13.89L7 23l5-3 5 3'
        '-1.21-9.12'
    ),
    'key': (
        'M21 2l-2 2m-7.61 7.61a5.5 5.5 0 11-7.78 7.78 5.5 5.5 0 017.78-7.78z'
        'm0 0L15.5 7.5m0 0l3 3L22 7l-3-3m-3.5 3.5L19 4'
    ),
    'check': 'M5 13l4 4L19 7',
}

SERVICES = [
    {
        'id': 'visibility',
        'title': 'Get Found by Local Customers',
        'description': (
            'Turn Google searches into phone calls. Your business shows up when '
            'people in your area are looking for exactly what you offer.'
        ),
        'icon': 'search',
    },
    {
        'id': 'authority',
        'title': 'Build Authority and Trust',
        'description': (
            'Present yourself as the expert you are. A polished website that '
            'makes potential clients confident before your first conversation.'
        ),
        'icon': 'award',
    },
    {
        'id': 'ownership',
        'title': 'Own Your Online Presence',
        'description': (
            'Stop depending on algorithms. A website you control that showcases '
            'your work and captures leads on your terms.'
        ),
        'icon': 'key',
    },
]

ABOUT_INTRO = (
    'I help small businesses stop being invisible online. Whether you\'re '
    'running a local service, building a consultancy, or showcasing creative '
    'work, you deserve a website that shows up when people search, and looks '
    'good when they find you. No tech jargon, no complicated quotes. Just '
    'clean, fast sites that work.'
)

TRUST_SIGNALS = [
    {
        'id': 'responsive',
        'title': 'I Actually Respond',
        'description': 'Same-day replies, not automated messages. You talk to me directly.',
    },
    {
        'id': 'results',
        'title': 'Results, Not Reports',
        'description': "You'll see your business show up on Google, not just pretty charts.",
    },
    {
        'id': 'ownership',
        'title': 'You Own Everything',
        'description': 'Your domain, your content, your code. No vendor lock-in.',
    },
    {
        'id': 'speed',
        'title': 'Built for Speed',
        'description': "Every site I build scores 100 on Google's performance tests.",
    },
]

LIGHTHOUSE_SCORE = 100

CONTACT_INTRO = (
    "No pressure. No jargon. Just tell me about your project and I'll "
    "get back to you within 24 hours."
)

# Client-side form copy and limits (mirrored by static/pages/js/site.js)
CONTACT_FORM = {
    'endpoint': '/api/contact',
    'min_name_length': 2,
    'min_message_length': 10,
    'errors': {
        'name': 'Please enter your name',
        'email': 'Please enter a valid email address',
        'message': 'Please tell me a bit about your business',
    },
    'success_detail': "I'll respond within 24 hours.",
    'error_detail': 'Something went wrong. Please try again.',
}


def lighthouse_label(score=LIGHTHOUSE_SCORE):
    """Accessible label for the Lighthouse badge."""
    return f'Lighthouse Performance Score: {score} out of 100'
