"""
Default site settings.

Every setting has a literal default so a site builds without any configuration
file or environment variable. config/site.yaml overrides any subset of them.
"""

from typing import Any, Dict

DEFAULT_SITE = {
    "site_name": "Ammly XYZ",
    "base_url": "https://ammly.xyz",
    "author": "Ammly",
    "author_role": "Software Engineer @ Safaricom",
    "description": "AI ventures, engineering notes, and a place to start your next project.",
    "scheduling_url": "https://calendly.com/ammly-xyz/your-next-project",
    "contact_email": "hello@ammly.xyz",
}

DEFAULT_NAV = [
    {"label": "Home", "href": "/#home"},
    {"label": "About", "href": "/#experience"},
    {"label": "Projects", "href": "/#projects"},
    {"label": "Blog", "href": "/blog/"},
    {"label": "Contact", "href": "/#contact"},
]

DEFAULT_HERO = {
    "headline": "Building AI ventures that",
    "gradient_text": "solve real problems",
    "introduction": (
        "Engineer and founder shipping practical AI products across law, "
        "finance, agriculture and education."
    ),
    "achievements": [
        {"icon": "rocket", "value": "10+", "label": "Projects Launched"},
        {"icon": "users", "value": "50K+", "label": "Users Reached"},
        {"icon": "award", "value": "15+", "label": "Awards Won"},
        {"icon": "trending-up", "value": "200%", "label": "Growth Rate"},
    ],
    "cta_buttons": [
        {"label": "View Projects", "href": "/#projects", "variant": "primary", "external": False},
        {"label": "Schedule a Call", "href": "/#contact", "variant": "outline", "external": False},
    ],
}

DEFAULT_CONTACT = {
    "title": "Let's Build Something Amazing",
    "subtitle": (
        "Ready to discuss your next project? Schedule a call and let's explore "
        "how we can work together."
    ),
}

# Listing sizes on the home page
HOME_VENTURE_LIMIT = 6
HOME_POST_LIMIT = 3


def get_default_site_config() -> Dict[str, Any]:
    """
    Get complete default site configuration with all expected fields.

    Returns:
        Dict with site settings plus nav, hero and contact sections
    """
    return {
        **DEFAULT_SITE,
        "nav": [dict(link) for link in DEFAULT_NAV],
        "hero": {
            **DEFAULT_HERO,
            "achievements": [dict(a) for a in DEFAULT_HERO["achievements"]],
            "cta_buttons": [dict(b) for b in DEFAULT_HERO["cta_buttons"]],
        },
        "contact": DEFAULT_CONTACT.copy(),
    }
