import os
from dataclasses import dataclass, field

from uitext.translations import translate

# (id, title, subtitle, path, icon) for each page under Alerting
ALERTING_PAGES = [
    ('alert-list', 'Alert rules', 'Rules that determine whether an alert will fire',
     'alerting/list', 'list-ul'),
    ('receivers', 'Contact points', 'Decide how your contacts are notified when an alert fires',
     'alerting/notifications', 'comment-alt-share'),
    ('am-routes', 'Notification policies', 'Determine how alerts are routed to contact points',
     'alerting/routes', 'sitemap'),
    ('silences', 'Silences', 'Stop notifications from one or more alerting rules',
     'alerting/silences', 'bell-slash'),
    ('groups', 'Alert groups', 'See grouped alerts from an Alertmanager instance',
     'alerting/groups', 'layer-group'),
    ('alerting-admin', 'Admin', None,
     'alerting/admin', 'cog'),
]


@dataclass
class NavLink:
    id: str
    text: str
    url: str
    icon: str
    sub_title: str = None
    children: list = field(default_factory=list)

    def to_dict(self):
        data = {
            'id': self.id,
            'text': self.text,
            'url': self.url,
            'icon': self.icon,
        }
        if self.sub_title:
            data['subTitle'] = self.sub_title
        if self.children:
            data['children'] = [child.to_dict() for child in self.children]
        return data


def get_sub_url():
    return os.environ.get('APP_SUB_URL', '').rstrip('/')


def _url(path):
    return f"{get_sub_url()}/{path}"


def _translate_optional(text, language):
    if text is None:
        return None
    return translate(text, language)


def build_explore_section(language=None):
    return NavLink(
        id='explore',
        text=translate('Explore', language),
        sub_title=translate('Explore your data', language),
        url=_url('explore'),
        icon='compass',
    )


def build_alerting_section(language=None):
    """
    Alerting root with one child per alerting page.
    Every title and subtitle goes through translate().
    """
    children = [
        NavLink(
            id=page_id,
            text=translate(title, language),
            sub_title=_translate_optional(sub_title, language),
            url=_url(path),
            icon=icon,
        )
        for page_id, title, sub_title, path, icon in ALERTING_PAGES
    ]

    return NavLink(
        id='alerting',
        text=translate('Alerting', language),
        sub_title=translate('Learn about problems in your systems moments after they occur', language),
        url=_url('alerting/list'),
        icon='bell',
        children=children,
    )


def build_nav_tree(language=None):
    return [build_explore_section(language), build_alerting_section(language)]
