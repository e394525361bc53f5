#!/usr/bin/python3

# emoji-catalog - An emoji catalog engine for emoji pickers
#
# Copyright (c) 2026 The emoji-catalog authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>

'''
This file implements test cases for loading the emoji dataset
'''

import os
import sys
import gzip
import json
import logging
import tempfile
import unittest

LOGGER = logging.getLogger('emoji-catalog')

# pylint: disable=wrong-import-position
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
from emoji_catalog import ec_catalog # pylint: disable=import-error
from emoji_catalog.ec_catalog import EmojiCategory # pylint: disable=import-error
from emoji_catalog.ec_catalog import EmojiSkinTone # pylint: disable=import-error
sys.path.pop(0)

import testutils # pylint: disable=import-error
# pylint: enable=wrong-import-position

# pylint: disable=missing-function-docstring
# pylint: disable=missing-class-docstring
# pylint: disable=invalid-name

class CatalogTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None
        self._tempdir = tempfile.TemporaryDirectory() # pylint: disable=consider-using-with

    def tearDown(self) -> None:
        self._tempdir.cleanup()

    def _path(self, basename: str) -> str:
        return os.path.join(self._tempdir.name, basename)

    def test_dummy(self) -> None:
        self.assertEqual(True, True)

    def test_bundled_dataset(self) -> None:
        catalog = ec_catalog.load_catalog(
            os.path.join(os.path.dirname(ec_catalog.__file__),
                         'data', 'emoji.json'))
        self.assertEqual('😀', catalog[0].emoji)
        self.assertEqual('grinning face', catalog[0].description)
        self.assertEqual(
            set(EmojiCategory), {emoji.category for emoji in catalog})
        self.assertTrue(any(emoji.supports_skin_tones for emoji in catalog))
        descriptions = [emoji.description for emoji in catalog]
        self.assertEqual(len(descriptions), len(set(descriptions)))

    def test_load_keeps_dataset_order(self) -> None:
        catalog = testutils.sample_catalog()
        path = self._path('emoji.json')
        testutils.write_dataset(
            path, [testutils.emoji_to_record(emoji) for emoji in catalog])
        self.assertEqual(catalog, ec_catalog.load_catalog(path))

    def test_load_gzip(self) -> None:
        catalog = testutils.sample_catalog()
        path = self._path('emoji.json.gz')
        with gzip.open(path, mode='wt', encoding='UTF-8') as dataset_file:
            json.dump([testutils.emoji_to_record(emoji) for emoji in catalog],
                      dataset_file)
        self.assertEqual(catalog, ec_catalog.load_catalog(path))

    def test_load_returns_new_list(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(
            path, [testutils.emoji_to_record(testutils.sample_catalog()[0])])
        first = ec_catalog.load_catalog(path)
        first.clear()
        self.assertEqual(1, len(ec_catalog.load_catalog(path)))

    def test_platform_version_key(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, [
            {'emoji': '🫎', 'description': 'moose',
             'category': 'Animals & Nature', 'platform_version': '16.4'},
            {'emoji': '🐻', 'description': 'bear',
             'category': 'Animals & Nature'},
        ])
        catalog = ec_catalog.load_catalog(path)
        self.assertEqual('16.4', catalog[0].platform_version)
        self.assertEqual('0.0', catalog[1].platform_version)
        self.assertEqual((), catalog[1].aliases)
        self.assertFalse(catalog[1].supports_skin_tones)

    def test_dataset_glyph_without_skin_tone(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, [
            {'emoji': '👍🏽', 'description': 'thumbs up',
             'category': 'People & Body', 'skin_tones': True}])
        emoji = ec_catalog.load_catalog(path)[0]
        self.assertEqual('👍', emoji.emoji)
        self.assertIsNone(emoji.skin_tone)

    def test_missing_dataset(self) -> None:
        with self.assertRaises(ec_catalog.DatasetUnavailable):
            ec_catalog.load_catalog(self._path('does-not-exist.json'))

    def test_invalid_json(self) -> None:
        path = self._path('emoji.json')
        with open(path, mode='w', encoding='UTF-8') as dataset_file:
            dataset_file.write('[{"emoji": "😀", ')
        with self.assertRaises(ec_catalog.DatasetCorrupt):
            ec_catalog.load_catalog(path)

    def test_not_a_list(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, {'emoji': '😀'})
        with self.assertRaises(ec_catalog.DatasetCorrupt):
            ec_catalog.load_catalog(path)

    def test_unknown_category(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, [
            {'emoji': '😀', 'description': 'grinning face',
             'category': 'Smileys & Emotion'},
            {'emoji': '🧩', 'description': 'puzzle piece',
             'category': 'Toys'},
        ])
        with self.assertRaisesRegex(ec_catalog.DatasetCorrupt, 'Record 1'):
            ec_catalog.load_catalog(path)

    def test_missing_description(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, [
            {'emoji': '😀', 'category': 'Smileys & Emotion'}])
        with self.assertRaisesRegex(
                ec_catalog.DatasetCorrupt, 'description'):
            ec_catalog.load_catalog(path)

    def test_aliases_not_a_list(self) -> None:
        path = self._path('emoji.json')
        testutils.write_dataset(path, [
            {'emoji': '😀', 'description': 'grinning face',
             'category': 'Smileys & Emotion', 'aliases': 'grinning'}])
        with self.assertRaisesRegex(ec_catalog.DatasetCorrupt, 'aliases'):
            ec_catalog.load_catalog(path)

    def test_errors_are_catalog_errors(self) -> None:
        self.assertTrue(issubclass(
            ec_catalog.DatasetUnavailable, ec_catalog.EmojiCatalogError))
        self.assertTrue(issubclass(
            ec_catalog.DatasetCorrupt, ec_catalog.EmojiCatalogError))
        self.assertTrue(issubclass(
            ec_catalog.InvalidToneToken, ValueError))

    def test_skin_tone_tokens(self) -> None:
        for tone in EmojiSkinTone:
            self.assertIs(tone, EmojiSkinTone.from_token(tone.token))
        self.assertIs(EmojiSkinTone.DEFAULT, EmojiSkinTone.from_token(''))
        self.assertEqual(
            ['', 'light', 'medium-light', 'medium', 'medium-dark', 'dark'],
            [tone.token for tone in EmojiSkinTone])
        with self.assertRaises(ec_catalog.InvalidToneToken):
            EmojiSkinTone.from_token('Medium')

    def test_skin_tone_modifiers(self) -> None:
        self.assertEqual(
            list(ec_catalog.SKIN_TONE_MODIFIERS),
            [tone.modifier for tone in EmojiSkinTone if tone.modifier])
        self.assertIs(
            EmojiSkinTone.LIGHT, EmojiSkinTone.from_modifier('\U0001F3FB'))
        with self.assertRaises(ec_catalog.InvalidToneToken):
            EmojiSkinTone.from_modifier('x')

    def test_glyph(self) -> None:
        emoji = testutils.make_emoji(
            '👮\u200d♀\ufe0f', 'woman police officer',
            EmojiCategory.PEOPLE_AND_BODY, supports_skin_tones=True)
        self.assertEqual('👮\u200d♀\ufe0f', emoji.glyph)
        toned = ec_catalog.Emoji(
            emoji.emoji, emoji.description, emoji.category,
            supports_skin_tones=True, skin_tone=EmojiSkinTone.LIGHT)
        self.assertEqual('👮🏻\u200d♀\ufe0f', toned.glyph)
        self.assertEqual(emoji.identity, toned.identity)

    def test_category_titles_and_icons(self) -> None:
        for category in EmojiCategory:
            self.assertEqual(category.value, category.title)
            self.assertTrue(category.icon)

if __name__ == '__main__':
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    unittest.main()
