import unittest
from unittest.mock import patch
import sys
import os

# Add project root to path
project_root = os.path.join(os.path.dirname(__file__), '..')
sys.path.append(project_root)

from uitext import navigation


class TestNavigation(unittest.TestCase):

    def test_alerting_section_in_chinese(self):
        with patch.dict(os.environ, {}, clear=True):
            section = navigation.build_alerting_section()
        self.assertEqual(section.text, '报警')
        self.assertEqual(section.sub_title, '在系统出现问题后立即了解问题')
        self.assertEqual(
            [child.text for child in section.children],
            ['警报规则', '联络点', '通知策略', '静默', '警戒组', '管理员'],
        )

    def test_alerting_section_in_english(self):
        with patch.dict(os.environ, {'LANGUAGE': 'en'}):
            section = navigation.build_alerting_section()
        self.assertEqual(section.text, 'Alerting')
        self.assertEqual(section.children[0].text, 'Alert rules')
        self.assertEqual(section.children[0].sub_title, 'Rules that determine whether an alert will fire')

    def test_admin_has_no_subtitle(self):
        section = navigation.build_alerting_section('zh')
        admin = section.children[-1]
        self.assertEqual(admin.id, 'alerting-admin')
        self.assertIsNone(admin.sub_title)
        self.assertNotIn('subTitle', admin.to_dict())

    def test_explicit_language(self):
        with patch.dict(os.environ, {'LANGUAGE': 'en'}):
            explore = navigation.build_explore_section('zh')
        self.assertEqual(explore.text, '探索')
        self.assertEqual(explore.sub_title, '探索你的数据')

    def test_sub_url_prefix(self):
        with patch.dict(os.environ, {'APP_SUB_URL': '/grafana/'}):
            tree = navigation.build_nav_tree('en')
        self.assertEqual(tree[0].url, '/grafana/explore')
        self.assertEqual(tree[1].children[1].url, '/grafana/alerting/notifications')

    def test_default_urls(self):
        with patch.dict(os.environ, {}, clear=True):
            tree = navigation.build_nav_tree()
        self.assertEqual([section.id for section in tree], ['explore', 'alerting'])
        self.assertEqual(tree[1].url, '/alerting/list')

    def test_to_dict(self):
        section = navigation.build_alerting_section('en')
        data = section.to_dict()
        self.assertEqual(data['id'], 'alerting')
        self.assertEqual(data['icon'], 'bell')
        self.assertEqual(len(data['children']), 6)
        self.assertEqual(data['children'][3]['subTitle'], 'Stop notifications from one or more alerting rules')
        self.assertNotIn('children', data['children'][0])


if __name__ == '__main__':
    unittest.main()
