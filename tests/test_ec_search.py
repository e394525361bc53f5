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
This file implements test cases for searching emoji
'''

from typing import Any
from typing import List
from typing import Sequence
from typing import Tuple
import os
import sys
import logging
import threading
import unittest

LOGGER = logging.getLogger('emoji-catalog')

# pylint: disable=wrong-import-position
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
from emoji_catalog import ec_search # pylint: disable=import-error
from emoji_catalog import ec_sections # pylint: disable=import-error
from emoji_catalog.ec_catalog import Emoji # pylint: disable=import-error
from emoji_catalog.ec_catalog import EmojiCategory # pylint: disable=import-error
from emoji_catalog.ec_catalog import EmojiSkinTone # pylint: disable=import-error
from emoji_catalog.ec_sections import Section # pylint: disable=import-error
from emoji_catalog.ec_sections import SectionConfig # pylint: disable=import-error
sys.path.pop(0)

import testutils # pylint: disable=import-error
# pylint: enable=wrong-import-position

# pylint: disable=missing-function-docstring
# pylint: disable=missing-class-docstring
# pylint: disable=invalid-name

def glyphs(emojis: Sequence[Emoji]) -> List[str]:
    return [emoji.glyph for emoji in emojis]

class SearchTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None
        self.sections = ec_sections.build_sections(
            testutils.sample_catalog())

    def tearDown(self) -> None:
        pass

    def test_dummy(self) -> None:
        self.assertEqual(True, True)

    def test_empty_query(self) -> None:
        self.assertEqual([], ec_search.search('', self.sections))
        self.assertEqual([], ec_search.search(' ', self.sections))

    def test_no_match(self) -> None:
        self.assertEqual([], ec_search.search('xylophone', self.sections))
        self.assertEqual([], ec_search.search('cat', []))

    def test_trailing_space(self) -> None:
        self.assertEqual(
            glyphs(ec_search.search('pizza', self.sections)),
            glyphs(ec_search.search('pizza ', self.sections)))
        self.assertEqual(['🍕'], glyphs(ec_search.search('pizza ', self.sections)))
        # Spaces inside the query are significant:
        self.assertEqual(
            ['🐈\u200d⬛'], glyphs(ec_search.search('black cat', self.sections)))

    def test_case_insensitive(self) -> None:
        self.assertEqual(
            glyphs(ec_search.search('smile', self.sections)),
            glyphs(ec_search.search('SMILE', self.sections)))

    def test_smile(self) -> None:
        # “smile” is an alias of 😄, a tag of 😀, and only part of
        # the alias “smiley_cat” of 😺
        self.assertEqual(
            ['😄', '😀', '😺'], glyphs(ec_search.search('smile', self.sections)))

    def test_alias_beats_tag_beats_description(self) -> None:
        section = Section('Test', emojis=[
            testutils.make_emoji('🅰', 'a x', tags=['ok']),
            testutils.make_emoji('🅱', 'b ok'),
            testutils.make_emoji('🆎', 'a very long description', aliases=['ok']),
        ])
        self.assertEqual(
            ['🆎', '🅰', '🅱'], glyphs(ec_search.search('ok', [section])))
        self.assertEqual(
            ec_search.MATCH_ALIAS,
            ec_search.match_level(section.emojis[2], 'ok'))
        self.assertEqual(
            ec_search.MATCH_TAG,
            ec_search.match_level(section.emojis[0], 'ok'))
        self.assertEqual(
            ec_search.MATCH_DESCRIPTION,
            ec_search.match_level(section.emojis[1], 'ok'))
        self.assertTrue(
            ec_search.better(section.emojis[2], section.emojis[0], 'ok'))
        self.assertFalse(
            ec_search.better(section.emojis[0], section.emojis[2], 'ok'))

    def test_whole_word_tiers_ignore_case(self) -> None:
        flag = testutils.make_emoji(
            '🗾', 'flag: Japan', category=EmojiCategory.FLAGS)
        self.assertEqual(
            ec_search.MATCH_DESCRIPTION, ec_search.match_level(flag, 'japan'))
        self.assertEqual(
            ec_search.MATCH_DESCRIPTION, ec_search.match_level(flag, 'JAPAN'))
        substring = testutils.make_emoji('🎌', 'japanese flags')
        self.assertEqual(
            ec_search.MATCH_NONE, ec_search.match_level(substring, 'japan'))
        section = Section('Test', emojis=[substring, flag])
        self.assertEqual(
            ['🗾', '🎌'], glyphs(ec_search.search('japan', [section])))

    def test_shorter_description_wins_at_same_level(self) -> None:
        results = ec_search.search('cat', self.sections)
        # All three have “cat” as a whole word in an alias:
        self.assertEqual(['🐱', '🐈\u200d⬛', '😺'], glyphs(results))
        self.assertEqual(
            [(0, 8), (0, 9), (0, 12)],
            [ec_search.relevance_key(emoji, 'cat') for emoji in results])
        results = ec_search.search('happy', self.sections)
        self.assertEqual(['😀', '😄'], glyphs(results))

    def test_substring_matches_keep_section_order(self) -> None:
        # “grin” matches only inside words, no whole word matches:
        results = ec_search.search('grin', self.sections)
        self.assertEqual(['😀', '😄', '😺'], glyphs(results))
        self.assertEqual(
            [(3, 0)] * 3,
            [ec_search.relevance_key(emoji, 'grin') for emoji in results])

    def test_whole_word_matches_before_substring_matches(self) -> None:
        section = Section('Test', emojis=[
            testutils.make_emoji('🅰', 'a', aliases=['wavering']),
            testutils.make_emoji('🅱', 'a long description', tags=['wave']),
        ])
        self.assertEqual(
            ['🅱', '🅰'], glyphs(ec_search.search('wave', [section])))

    def test_special_characters(self) -> None:
        self.assertEqual(['👍'], glyphs(ec_search.search('+1', self.sections)))
        self.assertEqual([], ec_search.search('(', self.sections))
        self.assertEqual([], ec_search.search('.*', self.sections))

    def test_results_keep_skin_tones(self) -> None:
        sections = ec_sections.build_sections(
            testutils.sample_catalog(),
            SectionConfig(default_tone=EmojiSkinTone.MEDIUM_LIGHT),
            {'thumbs up': 'dark'})
        self.assertEqual(['👍🏿'], glyphs(ec_search.search('thumbsup', sections)))
        self.assertEqual(['👋🏼'], glyphs(ec_search.search('wave', sections)))

    def test_only_given_sections_are_searched(self) -> None:
        smileys = [section for section in self.sections
                   if section.category is EmojiCategory.SMILEYS_AND_EMOTION]
        self.assertEqual(['😺'], glyphs(ec_search.search('cat', smileys)))

class SearchSessionTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None
        self.sections = ec_sections.build_sections(
            testutils.sample_catalog())
        self.delivered: List[Tuple[int, List[str]]] = []
        self.lock = threading.Lock()

    def tearDown(self) -> None:
        pass

    def callback(self, generation: int, results: List[Emoji]) -> None:
        with self.lock:
            self.delivered.append((generation, glyphs(results)))

    def test_dummy(self) -> None:
        self.assertEqual(True, True)

    def test_generations(self) -> None:
        session = ec_search.SearchSession()
        self.assertEqual(0, session.generation)
        (first, results) = session.run('pizza', self.sections)
        self.assertEqual(1, first)
        self.assertEqual(['🍕'], glyphs(results))
        self.assertTrue(session.is_current(first))
        (second, _results) = session.run('cat', self.sections)
        self.assertEqual(2, second)
        self.assertFalse(session.is_current(first))
        self.assertTrue(session.is_current(second))
        session.cancel()
        self.assertFalse(session.is_current(second))

    def test_stale_results_are_dropped(self) -> None:
        session = ec_search.SearchSession()
        (first, first_results) = session.run('pizza', self.sections)
        (second, second_results) = session.run('cat', self.sections)
        self.assertFalse(
            session.deliver(first, first_results, self.callback))
        self.assertEqual([], self.delivered)
        self.assertTrue(
            session.deliver(second, second_results, self.callback))
        self.assertEqual(
            [(second, ['🐱', '🐈\u200d⬛', '😺'])], self.delivered)

    def test_submit_slow_old_search(self) -> None:
        release = threading.Event()

        def slow_search(query: str, sections: Sequence[Section]) -> List[Emoji]:
            if query == 'pizza':
                release.wait(timeout=10)
            return ec_search.search(query, sections)

        session = ec_search.SearchSession(slow_search)
        slow = session.submit('pizza', self.sections, self.callback)
        fast = session.submit('cat', self.sections, self.callback)
        fast.join(timeout=10)
        release.set()
        slow.join(timeout=10)
        self.assertEqual(
            [(2, ['🐱', '🐈\u200d⬛', '😺'])], self.delivered)

    def test_cancel(self) -> None:
        release = threading.Event()

        def slow_search(query: str, sections: Sequence[Section]) -> List[Emoji]:
            release.wait(timeout=10)
            return ec_search.search(query, sections)

        session = ec_search.SearchSession(slow_search)
        thread = session.submit('pizza', self.sections, self.callback)
        session.cancel()
        release.set()
        thread.join(timeout=10)
        self.assertEqual([], self.delivered)

    def test_callback_starts_new_search(self) -> None:
        session = ec_search.SearchSession()
        started: List[int] = []

        def callback(generation: int, results: List[Emoji]) -> None:
            self.callback(generation, results)
            if not started:
                # The lock is reentrant for the delivering thread:
                (newer, _results) = session.run('cat', self.sections)
                started.append(newer)

        thread = session.submit('pizza', self.sections, callback)
        thread.join(timeout=10)
        self.assertFalse(thread.is_alive())
        self.assertEqual([(1, ['🍕'])], self.delivered)
        self.assertEqual([2], started)
        self.assertTrue(session.is_current(2))

    def test_failing_search_function(self) -> None:
        def failing_search(query: str, sections: Any) -> List[Emoji]:
            raise ValueError(f'cannot search for {query}')

        session = ec_search.SearchSession(failing_search)
        with self.assertLogs('emoji-catalog', level='ERROR'):
            thread = session.submit('pizza', self.sections, self.callback)
            thread.join(timeout=10)
        self.assertEqual([], self.delivered)

if __name__ == '__main__':
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    unittest.main()
