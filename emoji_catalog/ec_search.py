# vim:et sts=4 sw=4
#
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

'''A module to find the emoji matching a search query

Matching is by substring only, there is no fuzzy matching. The
matches are ranked by where the query matches as a whole word:
a match in the aliases beats a match in the tags which beats a match
in the description. Between two emoji matching at the same level,
the one with the shorter description wins, a shorter description
is usually the more exact one.
'''

from typing import Callable
from typing import List
from typing import Optional
from typing import Pattern
from typing import Sequence
from typing import Tuple
import re
import sys
import functools
import threading
import logging

from emoji_catalog.ec_catalog import Emoji
from emoji_catalog.ec_sections import Section

LOGGER = logging.getLogger('emoji-catalog')

# Levels of a whole word match, lower is better:
MATCH_ALIAS = 0
MATCH_TAG = 1
MATCH_DESCRIPTION = 2
MATCH_NONE = 3

SearchFunction = Callable[[str, Sequence[Section]], List[Emoji]]

def clean_query(query: str) -> str:
    '''Normalizes a query string

    Returns '' if nothing should be searched for. Otherwise the query
    is lower cased and one trailing space is removed. Spaces inside
    the query are kept, “black cat” is searched as it is.

    Examples:

    >>> clean_query('Smile ')
    'smile'

    >>> clean_query('black cat')
    'black cat'

    >>> clean_query('cat  ')
    'cat '

    >>> clean_query(' ')
    ''

    >>> clean_query('')
    ''
    '''
    if not query or query == ' ':
        return ''
    query = query.lower()
    if query.endswith(' '):
        query = query[:-1]
    return query

# Many queries are repeated while typing, e.g. after deleting a
# character again. Caching the compiled patterns avoids recompiling.
@functools.lru_cache(maxsize=256)
def whole_word_pattern(query: str) -> Pattern[str]:
    '''Returns a pattern matching the query as a whole word

    The query must not be preceded or followed by a letter or digit.
    Characters in the query have no special meaning. The case is
    ignored.

    Examples:

    >>> bool(whole_word_pattern('cat').search('black cat'))
    True

    >>> bool(whole_word_pattern('cat').search('cats'))
    False

    >>> bool(whole_word_pattern('cat').search('cat-face'))
    True

    >>> bool(whole_word_pattern('+1').search('+1'))
    True

    >>> bool(whole_word_pattern('(').search('a ( b'))
    True

    >>> bool(whole_word_pattern('japan').search('flag: Japan'))
    True
    '''
    return re.compile(
        r'(?<![^\W_])' + re.escape(query) + r'(?![^\W_])', re.IGNORECASE)

def matches_substring(emoji: Emoji, query: str) -> bool:
    '''Checks whether the cleaned query is contained in the aliases,
    tags, or description of the emoji, ignoring case'''
    return (any(query in alias.lower() for alias in emoji.aliases)
            or any(query in tag.lower() for tag in emoji.tags)
            or query in emoji.description.lower())

def match_level(emoji: Emoji, query: str) -> int:
    '''Returns the best level at which the query matches as a whole word

    :param emoji: The emoji to check
    :param query: A cleaned query
    :return: MATCH_ALIAS, MATCH_TAG, MATCH_DESCRIPTION, or MATCH_NONE
    '''
    pattern = whole_word_pattern(query)
    if any(pattern.search(alias) for alias in emoji.aliases):
        return MATCH_ALIAS
    if any(pattern.search(tag) for tag in emoji.tags):
        return MATCH_TAG
    if pattern.search(emoji.description):
        return MATCH_DESCRIPTION
    return MATCH_NONE

def relevance_key(emoji: Emoji, query: str) -> Tuple[int, int]:
    '''Sort key for search results, smaller keys are more relevant

    Emoji without any whole word match all get the same key, their
    order from the filter phase is kept.
    '''
    level = match_level(emoji, query)
    if level == MATCH_NONE:
        return (level, 0)
    return (level, len(emoji.description))

def better(first: Emoji, second: Emoji, query: str) -> bool:
    '''Checks whether “first” ranks strictly before “second”

    :param first: An emoji matching the query
    :param second: Another emoji matching the query
    :param query: A cleaned query
    '''
    return relevance_key(first, query) < relevance_key(second, query)

def search(query: str, sections: Sequence[Section]) -> List[Emoji]:
    '''Finds the emoji matching a query, most relevant first

    :param query: The query as typed by the user
    :param sections: The sections to search in, usually the sections
                     currently shown
    :return: The matching emoji. Empty if the query is empty or a
             single space.

    Examples:

    >>> from emoji_catalog.ec_catalog import EmojiCategory
    >>> smileys = Section('Smileys', emojis=[
    ...     Emoji('😀', 'grinning face', EmojiCategory.SMILEYS_AND_EMOTION,
    ...           aliases=('grinning',), tags=('smile', 'happy')),
    ...     Emoji('😄', 'grinning face with smiling eyes',
    ...           EmojiCategory.SMILEYS_AND_EMOTION,
    ...           aliases=('smile',), tags=('happy',))])
    >>> [emoji.emoji for emoji in search('smile', [smileys])]
    ['😄', '😀']
    >>> [emoji.emoji for emoji in search('grinning ', [smileys])]
    ['😀', '😄']
    >>> search(' ', [smileys])
    []
    '''
    query = clean_query(query)
    if not query:
        return []
    candidates = [
        emoji
        for section in sections
        for emoji in section.emojis
        if matches_substring(emoji, query)]
    # sorted() is stable, candidates with equal keys keep their order
    results = sorted(
        candidates, key=lambda emoji: relevance_key(emoji, query))
    LOGGER.debug('search(%r) found %s emoji', query, len(results))
    return results

class SearchSession():
    '''Runs searches so that only the result of the newest query is used

    Every query gets a generation number. A result is delivered only if
    no newer query has been started in the meantime, so a slow result
    for an old query can never replace the result of a newer query.

    The callback is called with the lock held. It may start new
    searches from the same thread, but it must not wait for other
    threads which start or cancel searches of this session, that
    would deadlock.
    '''
    def __init__(self, search_function: Optional[SearchFunction] = None) -> None:
        '''
        :param search_function: The function used to search,
                                defaults to search()
        '''
        self._search_function: SearchFunction = search_function or search
        self._lock = threading.RLock()
        self._generation = 0

    @property
    def generation(self) -> int:
        '''The generation of the newest query'''
        with self._lock:
            return self._generation

    def next_generation(self) -> int:
        '''Starts a new generation, results of older ones are discarded'''
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, generation: int) -> bool:
        '''Checks whether generation is the newest one'''
        with self._lock:
            return generation == self._generation

    def cancel(self) -> None:
        '''Discards the results of all searches still running'''
        self.next_generation()

    def deliver(
            self,
            generation: int,
            results: List[Emoji],
            callback: Callable[[int, List[Emoji]], None]) -> bool:
        '''Calls callback with the results if generation is still current

        :return: True if the results were delivered, False if they
                 were stale and dropped
        '''
        with self._lock:
            if generation != self._generation:
                LOGGER.debug(
                    'Dropping stale search results of generation %s, '
                    'current generation is %s',
                    generation, self._generation)
                return False
            callback(generation, results)
            return True

    def run(
            self,
            query: str,
            sections: Sequence[Section]) -> Tuple[int, List[Emoji]]:
        '''Searches synchronously in a new generation

        :return: (generation, results). The caller must check
                 is_current(generation) before using the results
                 if other searches may have been started meanwhile.
        '''
        generation = self.next_generation()
        return (generation, self._search_function(query, sections))

    def submit(
            self,
            query: str,
            sections: Sequence[Section],
            callback: Callable[[int, List[Emoji]], None]) -> threading.Thread:
        '''Searches in a background thread

        callback(generation, results) is called from the background
        thread, only if no newer search was started or cancel() was
        called before the search finished.

        The lock of the session is held while the callback runs. The
        callback must not block on other threads using this session.

        :return: The started thread
        '''
        generation = self.next_generation()
        # Use a copy, the caller may rebuild its sections meanwhile:
        sections = list(sections)

        def worker() -> None:
            try:
                results = self._search_function(query, sections)
            except Exception as error: # pylint: disable=broad-except
                LOGGER.exception(
                    'Search for %r in generation %s failed: %s: %s',
                    query, generation, error.__class__.__name__, error)
                return
            self.deliver(generation, results, callback)

        thread = threading.Thread(
            target=worker, name=f'emoji-search-{generation}', daemon=True)
        thread.start()
        return thread

if __name__ == "__main__":
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    import doctest
    (FAILED, ATTEMPTED) = doctest.testmod()
    LOGGER.info('whole_word_pattern() cache info: %s',
                whole_word_pattern.cache_info())
    sys.exit(FAILED)
