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

'''A module to load the emoji dataset of emoji-catalog

The dataset is a JSON list of records like this:

    {"emoji": "😀", "description": "grinning face",
     "category": "Smileys & Emotion", "aliases": ["grinning"],
     "tags": ["smile", "happy"], "unicode_version": "6.1",
     "ios_version": "6.0", "skin_tones": false}

“ios_version” is the minimum platform version needed to render the
emoji, “platform_version” is accepted as well.
'''

from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from typing import Optional
from dataclasses import dataclass
from enum import Enum
import os
import sys
import json
import functools
import logging

from emoji_catalog import ec_util
from emoji_catalog.ec_util import N_

LOGGER = logging.getLogger('emoji-catalog')

DATASET_BASENAMES = ('emoji.json',)

# Fitzpatrick type 1-2 … type 6
SKIN_TONE_MODIFIERS = ('🏻', '🏼', '🏽', '🏾', '🏿')

# Characters which get a skin tone modifier when they appear after the
# first element of a ZWJ sequence, for example both people in
# “🧑‍🤝‍🧑 people holding hands”:
SKIN_TONE_PEOPLE = ('🧑', '👨', '👩', '🧒', '👦', '👧', '🫱', '🫲')

def strip_skin_tones(glyph: str) -> str:
    '''Removes all skin tone modifiers from an emoji sequence

    Examples:

    >>> strip_skin_tones('👍🏾')
    '👍'

    >>> strip_skin_tones('🧑🏻‍🤝‍🧑🏿') == '🧑‍🤝‍🧑'
    True
    '''
    for modifier in SKIN_TONE_MODIFIERS:
        glyph = glyph.replace(modifier, '')
    return glyph

def apply_skin_tone_modifier(glyph: str, modifier: str) -> str:
    # pylint: disable=line-too-long
    '''Renders an emoji sequence with a skin tone modifier

    The modifier is inserted after the first character of the
    sequence and after the first character of every further element
    of a ZWJ sequence which is a person or a hand. A variation
    selector-16 directly after such a character is dropped, a skin
    tone modifier already selects the emoji presentation.

    Existing skin tone modifiers are removed first. An empty
    modifier returns the sequence without any skin tone.

    :param glyph: The emoji sequence
    :param modifier: One of SKIN_TONE_MODIFIERS or ''

    Examples:

    >>> apply_skin_tone_modifier('👍', '🏽')
    '👍🏽'

    >>> apply_skin_tone_modifier('✌️', '🏻')
    '✌🏻'

    >>> apply_skin_tone_modifier('👮‍♀️', '🏿') == '👮🏿‍♀️'
    True

    >>> apply_skin_tone_modifier('🧑‍🤝‍🧑', '🏼') == '🧑🏼‍🤝‍🧑🏼'
    True

    >>> apply_skin_tone_modifier('👍🏽', '🏿')
    '👍🏿'

    >>> apply_skin_tone_modifier('👍🏽', '')
    '👍'
    '''
    # pylint: enable=line-too-long
    glyph = strip_skin_tones(glyph)
    if not modifier or not glyph:
        return glyph
    parts = glyph.split('\u200d')
    for index, part in enumerate(parts):
        if not part or (index > 0 and part[0] not in SKIN_TONE_PEOPLE):
            continue
        rest = part[1:]
        if rest.startswith('\ufe0f'):
            rest = rest[1:]
        parts[index] = part[0] + modifier + rest
    return '\u200d'.join(parts)

class EmojiCatalogError(Exception):
    '''Base class of all errors raised by emoji-catalog'''

class DatasetUnavailable(EmojiCatalogError):
    '''The emoji dataset could not be found or read'''

class DatasetCorrupt(EmojiCatalogError):
    '''The emoji dataset could be read but its contents are invalid'''

class InvalidToneToken(ValueError, EmojiCatalogError):
    '''A string does not name any known skin tone'''

class EmojiSkinTone(Enum):
    '''The skin tones an emoji can be rendered with

    The value of each member is its persistence token. DEFAULT
    has the empty string as its token, which is the same as the
    marker for “explicitly cleared” in a tone store.

    Examples:

    >>> EmojiSkinTone.MEDIUM.token
    'medium'

    >>> EmojiSkinTone.MEDIUM.modifier
    '🏽'

    >>> EmojiSkinTone.DEFAULT.modifier
    ''

    >>> EmojiSkinTone.from_token('medium-dark')
    <EmojiSkinTone.MEDIUM_DARK: 'medium-dark'>

    >>> EmojiSkinTone.from_token('🏿')
    <EmojiSkinTone.DARK: 'dark'>

    >>> EmojiSkinTone.from_token('purple') # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    emoji_catalog.ec_catalog.InvalidToneToken: Invalid skin tone token: 'purple'
    '''
    DEFAULT = ''
    LIGHT = 'light'
    MEDIUM_LIGHT = 'medium-light'
    MEDIUM = 'medium'
    MEDIUM_DARK = 'medium-dark'
    DARK = 'dark'

    @property
    def token(self) -> str:
        '''The stable string used to persist this skin tone'''
        return str(self.value)

    @property
    def modifier(self) -> str:
        '''The Unicode skin tone modifier, '' for DEFAULT'''
        if self is EmojiSkinTone.DEFAULT:
            return ''
        return SKIN_TONE_MODIFIERS[list(EmojiSkinTone).index(self) - 1]

    @classmethod
    def from_token(cls, token: str) -> 'EmojiSkinTone':
        '''Returns the skin tone for a persistence token

        The skin tone modifier characters themselves are accepted
        as well because older stores persisted those.

        :param token: A persistence token or a skin tone modifier
        :raises InvalidToneToken: if the token is unknown
        '''
        for tone in cls:
            if token in (tone.token, tone.modifier):
                return tone
        raise InvalidToneToken(f'Invalid skin tone token: {token!r}')

    @classmethod
    def from_modifier(cls, modifier: str) -> 'EmojiSkinTone':
        '''Returns the skin tone for a skin tone modifier character'''
        if modifier not in SKIN_TONE_MODIFIERS:
            raise InvalidToneToken(f'Not a skin tone modifier: {modifier!r}')
        return list(cls)[SKIN_TONE_MODIFIERS.index(modifier) + 1]

class EmojiCategory(Enum):
    '''The top level groups of the emoji dataset

    The value of each member is the group name used in the dataset.
    '''
    SMILEYS_AND_EMOTION = 'Smileys & Emotion'
    PEOPLE_AND_BODY = 'People & Body'
    ANIMALS_AND_NATURE = 'Animals & Nature'
    FOOD_AND_DRINK = 'Food & Drink'
    TRAVEL_AND_PLACES = 'Travel & Places'
    ACTIVITIES = 'Activities'
    OBJECTS = 'Objects'
    SYMBOLS = 'Symbols'
    FLAGS = 'Flags'

    @property
    def title(self) -> str:
        '''The untranslated display title of the category'''
        return CATEGORY_TITLES[self]

    @property
    def icon(self) -> str:
        '''A representative emoji for the category'''
        return CATEGORY_ICONS[self]

# Order in which categories are shown if nothing else is configured:
DEFAULT_CATEGORIES: Tuple[EmojiCategory, ...] = tuple(EmojiCategory)

CATEGORY_TITLES: Dict[EmojiCategory, str] = {
    EmojiCategory.SMILEYS_AND_EMOTION: N_('Smileys & Emotion'),
    EmojiCategory.PEOPLE_AND_BODY: N_('People & Body'),
    EmojiCategory.ANIMALS_AND_NATURE: N_('Animals & Nature'),
    EmojiCategory.FOOD_AND_DRINK: N_('Food & Drink'),
    EmojiCategory.TRAVEL_AND_PLACES: N_('Travel & Places'),
    EmojiCategory.ACTIVITIES: N_('Activities'),
    EmojiCategory.OBJECTS: N_('Objects'),
    EmojiCategory.SYMBOLS: N_('Symbols'),
    EmojiCategory.FLAGS: N_('Flags'),
}

CATEGORY_ICONS: Dict[EmojiCategory, str] = {
    EmojiCategory.SMILEYS_AND_EMOTION: '😀',
    EmojiCategory.PEOPLE_AND_BODY: '👋',
    EmojiCategory.ANIMALS_AND_NATURE: '🐻',
    EmojiCategory.FOOD_AND_DRINK: '🍔',
    EmojiCategory.TRAVEL_AND_PLACES: '🚗',
    EmojiCategory.ACTIVITIES: '⚽',
    EmojiCategory.OBJECTS: '💡',
    EmojiCategory.SYMBOLS: '🔣',
    EmojiCategory.FLAGS: '🏳\ufe0f',
}

@dataclass(frozen=True)
class Emoji:
    '''
    An immutable emoji record

    emoji: str                   The glyph without any skin tone
    description: str             Human readable name, never contains
                                 skin tone information
    category: EmojiCategory      The top level group
    aliases: Tuple[str, ...]     Short names like 'grinning'
    tags: Tuple[str, ...]        Search keywords
    platform_version: str        Minimum platform version to render it
    supports_skin_tones: bool    Whether skin tone variants exist
    skin_tone: Optional[EmojiSkinTone]
                                 The applied skin tone, None for the
                                 default (yellow) rendering
    unicode_version: str         Unicode version which added the emoji
    '''
    emoji: str
    description: str
    category: EmojiCategory
    aliases: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    platform_version: str = '0.0'
    supports_skin_tones: bool = False
    skin_tone: Optional[EmojiSkinTone] = None
    unicode_version: str = ''

    @property
    def identity(self) -> str:
        '''The identity of the base emoji, used as key in tone stores'''
        return self.description

    @property
    def glyph(self) -> str:
        '''The glyph rendered with the applied skin tone'''
        if self.skin_tone is None:
            return self.emoji
        return apply_skin_tone_modifier(self.emoji, self.skin_tone.modifier)

def _string_tuple(
        value: Any, field_name: str, index: int) -> Tuple[str, ...]:
    '''Checks that a record field is a list of strings'''
    if value is None:
        return ()
    if (not isinstance(value, list)
            or not all(isinstance(item, str) for item in value)):
        raise DatasetCorrupt(
            f'Record {index}: “{field_name}” is not a list of strings')
    return tuple(value)

def emoji_from_record(record: Any, index: int = 0) -> Emoji:
    '''Creates an Emoji from one record of the dataset

    :param record: A dictionary parsed from the dataset
    :param index: Position of the record, used in error messages
    :raises DatasetCorrupt: if the record is not usable

    Examples:

    >>> emoji_from_record({'emoji': '👍', 'description': 'thumbs up',
    ...                    'category': 'People & Body',
    ...                    'aliases': ['+1', 'thumbsup'],
    ...                    'tags': ['approve', 'ok'],
    ...                    'ios_version': '6.0', 'skin_tones': True},
    ...                   index=0) # doctest: +NORMALIZE_WHITESPACE
    Emoji(emoji='👍', description='thumbs up',
          category=<EmojiCategory.PEOPLE_AND_BODY: 'People & Body'>,
          aliases=('+1', 'thumbsup'), tags=('approve', 'ok'),
          platform_version='6.0', supports_skin_tones=True,
          skin_tone=None, unicode_version='')

    >>> emoji_from_record({'emoji': '👍', 'description': 'thumbs up',
    ...                    'category': 'Gestures'}, index=7) # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    emoji_catalog.ec_catalog.DatasetCorrupt: Record 7: unknown category 'Gestures'
    '''
    if not isinstance(record, dict):
        raise DatasetCorrupt(f'Record {index}: not an object')
    for key in ('emoji', 'description', 'category'):
        if not isinstance(record.get(key), str) or not record[key]:
            raise DatasetCorrupt(
                f'Record {index}: missing or invalid “{key}”')
    try:
        category = EmojiCategory(record['category'])
    except ValueError as error:
        raise DatasetCorrupt(
            f'Record {index}: unknown category {record["category"]!r}'
        ) from error
    platform_version = record.get(
        'ios_version', record.get('platform_version', '0.0'))
    if not isinstance(platform_version, str):
        raise DatasetCorrupt(
            f'Record {index}: platform version is not a string')
    return Emoji(
        emoji=strip_skin_tones(record['emoji']),
        description=record['description'],
        category=category,
        aliases=_string_tuple(record.get('aliases'), 'aliases', index),
        tags=_string_tuple(record.get('tags'), 'tags', index),
        platform_version=platform_version or '0.0',
        supports_skin_tones=bool(record.get('skin_tones', False)),
        unicode_version=str(record.get('unicode_version', '')))

def find_dataset_path() -> str:
    '''Finds the dataset file to use

    A dataset in the user data directory
    (“~/.local/share/emoji-catalog/data” by default)
    overrides the one installed with the package.

    Returns '' if no dataset can be found.
    '''
    dirnames = (ec_util.user_datadir(), ec_util.DATADIR)
    (path, dummy_open_function) = ec_util.find_path_and_open_function(
        dirnames, DATASET_BASENAMES)
    return path

@functools.lru_cache(maxsize=None)
def _load_catalog(path: str) -> Tuple[Emoji, ...]:
    '''Parses the dataset at path, cached because the data is read-only'''
    open_function = ec_util.open_function_for_path(path)
    try:
        with open_function(path, mode='rt', encoding='utf-8') as dataset_file:
            records = json.load(dataset_file)
    except (OSError,) as error:
        raise DatasetUnavailable(
            f'Cannot read emoji dataset “{path}”: {error}') from error
    except (ValueError, EOFError) as error:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors,
        # a truncated .gz file raises EOFError.
        raise DatasetCorrupt(
            f'Cannot parse emoji dataset “{path}”: {error}') from error
    if not isinstance(records, list):
        raise DatasetCorrupt(f'Emoji dataset “{path}” is not a list')
    catalog = tuple(
        emoji_from_record(record, index)
        for index, record in enumerate(records))
    LOGGER.debug('Loaded %s emoji from “%s”', len(catalog), path)
    return catalog

def load_catalog(path: str = '') -> List[Emoji]:
    '''Loads the emoji dataset

    Returns the emoji in dataset order.

    :param path: Path of a dataset file (plain or “.gz” compressed).
                 If empty, the dataset is searched for with
                 find_dataset_path().
    :raises DatasetUnavailable: if the dataset cannot be found or read
    :raises DatasetCorrupt: if the dataset is invalid
    '''
    if not path:
        path = find_dataset_path()
        if not path:
            raise DatasetUnavailable(
                f'Could not find {DATASET_BASENAMES} in '
                f'“{ec_util.user_datadir()}” or “{ec_util.DATADIR}”')
    elif not os.path.exists(path):
        raise DatasetUnavailable(f'Emoji dataset “{path}” does not exist')
    return list(_load_catalog(os.path.abspath(path)))

if __name__ == "__main__":
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    import doctest
    (FAILED, ATTEMPTED) = doctest.testmod()
    LOGGER.info('%s emoji in the bundled dataset', len(load_catalog()))
    sys.exit(FAILED)
