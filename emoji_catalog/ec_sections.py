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

'''
Groups the emoji catalog into sections, one section per category.
'''

from typing import Callable
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from dataclasses import dataclass
from dataclasses import field
import logging

from emoji_catalog import ec_util
from emoji_catalog.ec_util import _
from emoji_catalog.ec_catalog import DEFAULT_CATEGORIES
from emoji_catalog.ec_catalog import Emoji
from emoji_catalog.ec_catalog import EmojiCategory
from emoji_catalog.ec_catalog import EmojiSkinTone
from emoji_catalog.ec_skin_tones import apply_persisted_or_default

LOGGER = logging.getLogger('emoji-catalog')

# A platform version high enough to let every emoji through:
ANY_PLATFORM_VERSION = '100.0'

def default_category_title(category: EmojiCategory) -> str:
    '''Returns the translated title of a category'''
    return _(category.title)

def default_category_icon(category: EmojiCategory) -> str:
    '''Returns the representative emoji of a category'''
    return category.icon

@dataclass
class Section:
    '''
    An ordered group of emoji shown under one title

    Sections are filled while they are built and treated as read-only
    afterwards. The position of a section in the list of sections is
    its identity for scrolling and toolbar highlighting.

    title: str                   Display title
    icon: str                    Representative emoji for the toolbar
    emojis: List[Emoji]          The emoji in dataset order
    category: Optional[EmojiCategory]
                                 The category the section was created
                                 for, None for synthetic sections like
                                 search results
    '''
    title: str
    icon: str = ''
    emojis: List[Emoji] = field(default_factory=list)
    category: Optional[EmojiCategory] = None

    def __len__(self) -> int:
        return len(self.emojis)

    def append(self, emoji: Emoji) -> None:
        '''Appends an emoji to the section'''
        self.emojis.append(emoji)

@dataclass(frozen=True)
class SectionConfig:
    '''
    Configuration of build_sections()

    categories: Tuple[EmojiCategory, ...]
                                 Categories to show and their order
    default_tone: Optional[EmojiSkinTone]
                                 Skin tone for emoji without a
                                 persisted choice
    platform_version: str        Emoji needing a newer platform are
                                 left out
    category_title: Callable     Category -> display title
    category_icon: Callable      Category -> toolbar icon
    keep_scan_order: bool        If True, sections are returned in the
                                 order their first emoji appears in the
                                 dataset instead of in the order of
                                 “categories”
    '''
    categories: Tuple[EmojiCategory, ...] = DEFAULT_CATEGORIES
    default_tone: Optional[EmojiSkinTone] = None
    platform_version: str = ANY_PLATFORM_VERSION
    category_title: Callable[[EmojiCategory], str] = default_category_title
    category_icon: Callable[[EmojiCategory], str] = default_category_icon
    keep_scan_order: bool = False

def is_supported(emoji: Emoji, platform_version: str) -> bool:
    '''Checks whether the platform is new enough to render the emoji

    Examples:

    >>> emoji = Emoji('🫎', 'moose', EmojiCategory.ANIMALS_AND_NATURE,
    ...               platform_version='17.4')
    >>> is_supported(emoji, '17.10')
    True
    >>> is_supported(emoji, '17.4')
    True
    >>> is_supported(emoji, '9.0')
    False
    '''
    return ec_util.compare_versions(
        emoji.platform_version, platform_version) <= 0

def build_sections(
        catalog: Iterable[Emoji],
        config: Optional[SectionConfig] = None,
        persisted: Optional[Dict[str, str]] = None) -> List[Section]:
    '''Groups the catalog into sections

    The catalog is scanned once in dataset order. Emoji needing a newer
    platform version are skipped, the persisted or default skin tone is
    applied to the others. An emoji is appended to the section which
    has the title of its category. If there is no such section yet, a
    new one is created, but only if the category is allowed by the
    configuration.

    :param catalog: The emoji in dataset order
    :param config: The configuration, defaults to SectionConfig()
    :param persisted: The persisted skin tones as returned by
                      ToneStore.get_all()
    :return: The sections, in the order of config.categories unless
             config.keep_scan_order is True
    '''
    if config is None:
        config = SectionConfig()
    if persisted is None:
        persisted = {}
    sections: List[Section] = []
    sections_by_title: Dict[str, Section] = {}
    skipped = 0
    for emoji in catalog:
        if not is_supported(emoji, config.platform_version):
            skipped += 1
            continue
        emoji = apply_persisted_or_default(
            emoji, persisted, config.default_tone)
        title = config.category_title(emoji.category)
        if title in sections_by_title:
            sections_by_title[title].append(emoji)
        elif emoji.category in config.categories:
            section = Section(
                title=title,
                icon=config.category_icon(emoji.category),
                emojis=[emoji],
                category=emoji.category)
            sections_by_title[title] = section
            sections.append(section)
    if not config.keep_scan_order:
        sections.sort(
            key=lambda section: config.categories.index(section.category))
    LOGGER.debug(
        'Built %s sections, skipped %s emoji newer than platform version %s',
        len(sections), skipped, config.platform_version)
    return sections

def section_at(sections: Sequence[Section], index: int) -> Optional[Section]:
    '''Returns the section at index or None if there is no such section

    Negative indices are out of range as well.
    '''
    if 0 <= index < len(sections):
        return sections[index]
    return None

def emoji_at(
        sections: Sequence[Section],
        section_index: int,
        item_index: int) -> Optional[Emoji]:
    '''Returns an emoji by position or None if there is no such emoji

    Stale positions, for example from before the sections were rebuilt,
    just give None.
    '''
    section = section_at(sections, section_index)
    if section is None or not 0 <= item_index < len(section.emojis):
        return None
    return section.emojis[item_index]

def section_index(
        sections: Sequence[Section],
        category: EmojiCategory) -> Optional[int]:
    '''Returns the index of the section of a category or None'''
    for index, section in enumerate(sections):
        if section.category is category:
            return index
    return None
