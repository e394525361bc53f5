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
The interface of emoji-catalog for an emoji picker user interface.

An EmojiPicker instance is passed explicitly to whatever needs it,
there is no process wide instance. Several pickers with different
stores can be used at the same time.
'''

from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
import logging

from emoji_catalog.ec_util import _
from emoji_catalog.ec_catalog import Emoji
from emoji_catalog.ec_catalog import EmojiCategory
from emoji_catalog.ec_catalog import EmojiSkinTone
from emoji_catalog.ec_catalog import load_catalog
from emoji_catalog import ec_skin_tones
from emoji_catalog import ec_sections
from emoji_catalog.ec_sections import Section
from emoji_catalog.ec_sections import SectionConfig
from emoji_catalog.ec_search import SearchFunction
from emoji_catalog.ec_search import SearchSession
from emoji_catalog.ec_search import search
from emoji_catalog.ec_store import MemoryToneStore
from emoji_catalog.ec_store import ToneStore

LOGGER = logging.getLogger('emoji-catalog')

@dataclass
class Localization:
    '''
    The texts a picker shows

    search_field_placeholder: str    Placeholder of the search entry
    search_results_title: str        Title of the search results section
    search_results_empty_title: str  Title if nothing was found
    category_titles: Dict[EmojiCategory, str]
                                     Titles overriding the translated
                                     default titles of categories
    '''
    search_field_placeholder: str = field(
        default_factory=lambda: _('Search'))
    search_results_title: str = field(
        default_factory=lambda: _('Search results'))
    search_results_empty_title: str = field(
        default_factory=lambda: _('No emoji found'))
    category_titles: Dict[EmojiCategory, str] = field(default_factory=dict)

    def category_title(self, category: EmojiCategory) -> str:
        '''Returns the title to show for a category

        Examples:

        >>> Localization(category_titles={
        ...     EmojiCategory.FLAGS: 'Flaggen'}).category_title(
        ...         EmojiCategory.FLAGS)
        'Flaggen'
        '''
        if category in self.category_titles:
            return self.category_titles[category]
        return ec_sections.default_category_title(category)

SectionLoader = Callable[[Localization], List[Section]]

class EmojiPicker():
    '''Loads sections, searches, and handles skin tones for a picker'''

    def __init__(self,
                 store: Optional[ToneStore] = None,
                 config: Optional[SectionConfig] = None,
                 localization: Optional[Localization] = None,
                 dataset_path: str = '',
                 section_loader: Optional[SectionLoader] = None,
                 search_function: Optional[SearchFunction] = None) -> None:
        '''
        :param store: Where chosen skin tones are persisted. If None,
                      they are only kept in memory.
        :param config: Configuration for building the default sections
        :param localization: Texts to show. The category titles of
                             the localization are used unless the
                             config sets its own category_title.
        :param dataset_path: Path of the emoji dataset, if empty the
                             bundled dataset is used
        :param section_loader: If given, called instead of building
                               the default sections
        :param search_function: If given, called instead of the
                                default search
        '''
        self._store = store if store is not None else MemoryToneStore()
        self._localization = localization or Localization()
        if config is None:
            config = SectionConfig()
        if config.category_title is ec_sections.default_category_title:
            config = replace(
                config, category_title=self._localization.category_title)
        self._config = config
        self._dataset_path = dataset_path
        self._section_loader = section_loader
        self._search_function = search_function
        self._search_session = SearchSession(self.get_search_results)

    @property
    def store(self) -> ToneStore:
        '''The tone store'''
        return self._store

    @property
    def config(self) -> SectionConfig:
        '''The configuration used by get_default_sections()'''
        return self._config

    @property
    def localization(self) -> Localization:
        '''The texts to show'''
        return self._localization

    @property
    def search_session(self) -> SearchSession:
        '''A search session using get_search_results()'''
        return self._search_session

    def get_all_emoji(self) -> List[Emoji]:
        '''Returns all emoji of the dataset in dataset order

        :raises DatasetUnavailable: if the dataset cannot be read
        :raises DatasetCorrupt: if the dataset is invalid
        '''
        return load_catalog(self._dataset_path)

    def get_default_sections(
            self,
            config: Optional[SectionConfig] = None,
            localization: Optional[Localization] = None) -> List[Section]:
        '''Returns the sections to browse

        :param config: Overrides the configuration of the picker
        :param localization: Overrides the localization of the picker
        '''
        localization = localization or self._localization
        if self._section_loader is not None:
            return self._section_loader(localization)
        if config is None:
            config = self._config
        if config.category_title in (
                ec_sections.default_category_title,
                self._localization.category_title):
            config = replace(config, category_title=localization.category_title)
        return ec_sections.build_sections(
            self.get_all_emoji(), config, self._store.get_all())

    def get_search_results(
            self, query: str, sections: Sequence[Section]) -> List[Emoji]:
        '''Returns the emoji in sections matching query, best first'''
        if self._search_function is not None:
            return self._search_function(query, sections)
        return search(query, sections)

    def search_results_section(self, results: List[Emoji]) -> Section:
        '''Wraps search results in the single section showing them'''
        if results:
            title = self._localization.search_results_title
        else:
            title = self._localization.search_results_empty_title
        return Section(title=title, emojis=list(results))

    def persist_tone(
            self, emoji: Emoji, tone: Optional[EmojiSkinTone]) -> None:
        '''Remembers the skin tone chosen for emoji

        None or EmojiSkinTone.DEFAULT remember that the default
        rendering was chosen explicitly.
        '''
        ec_skin_tones.persist(self._store, emoji.identity, tone)

    def clear_persisted_tones(self) -> None:
        '''Forgets all chosen skin tones'''
        ec_skin_tones.clear_all(self._store)

    @staticmethod
    def resolve_tone(emoji: Emoji, tone: Optional[EmojiSkinTone]) -> Emoji:
        '''Returns the variant of emoji with the skin tone “tone”'''
        return ec_skin_tones.resolve_tone(emoji, tone)

    @staticmethod
    def skin_tone_variants(emoji: Emoji) -> List[Emoji]:
        '''Returns the variants to offer in a skin tone selector'''
        return ec_skin_tones.skin_tone_variants(emoji)
