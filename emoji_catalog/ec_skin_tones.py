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
Resolves the skin tone variants of emoji and persists the skin tones
chosen by the user.

The skin tone applied to an emoji follows this precedence:

1. The tone the user explicitly chose for this emoji, which may also be
   an explicit choice of the default (yellow) rendering.
2. The configured default skin tone, if any.
3. The rendering from the dataset.
'''

from typing import Dict
from typing import List
from typing import Optional
from dataclasses import dataclass
from dataclasses import replace
from enum import Enum
import logging

from emoji_catalog.ec_catalog import Emoji
from emoji_catalog.ec_catalog import EmojiSkinTone
from emoji_catalog.ec_catalog import InvalidToneToken
from emoji_catalog.ec_store import ToneStore

LOGGER = logging.getLogger('emoji-catalog')

class ToneChoiceKind(Enum):
    '''What a tone store says about one emoji'''
    NO_PREFERENCE = 'no-preference'
    CLEARED = 'cleared'
    TONE = 'tone'

@dataclass(frozen=True)
class ToneChoice:
    '''
    The persisted skin tone preference for one emoji

    kind: ToneChoiceKind         NO_PREFERENCE if the user never chose
                                 a tone, CLEARED if the user explicitly
                                 chose the default rendering, TONE if
                                 the user chose “tone”
    tone: Optional[EmojiSkinTone]
                                 Only set when kind is TONE
    '''
    kind: ToneChoiceKind = ToneChoiceKind.NO_PREFERENCE
    tone: Optional[EmojiSkinTone] = None

    @classmethod
    def no_preference(cls) -> 'ToneChoice':
        '''The user never chose a skin tone'''
        return cls(ToneChoiceKind.NO_PREFERENCE)

    @classmethod
    def cleared(cls) -> 'ToneChoice':
        '''The user explicitly chose the default rendering'''
        return cls(ToneChoiceKind.CLEARED)

    @classmethod
    def of(cls, tone: Optional[EmojiSkinTone]) -> 'ToneChoice':
        '''The user chose “tone”, None and DEFAULT mean cleared

        Examples:

        >>> ToneChoice.of(EmojiSkinTone.DARK).kind
        <ToneChoiceKind.TONE: 'tone'>

        >>> ToneChoice.of(EmojiSkinTone.DEFAULT) == ToneChoice.cleared()
        True

        >>> ToneChoice.of(None) == ToneChoice.cleared()
        True
        '''
        if tone is None or tone is EmojiSkinTone.DEFAULT:
            return cls.cleared()
        return cls(ToneChoiceKind.TONE, tone)

    @classmethod
    def from_stored(cls, value: Optional[str]) -> 'ToneChoice':
        '''Decodes a value read from a tone store

        An unknown token is logged and treated as if there were
        no persisted preference.

        :param value: The stored value, None if the key is absent

        Examples:

        >>> ToneChoice.from_stored(None).kind
        <ToneChoiceKind.NO_PREFERENCE: 'no-preference'>

        >>> ToneChoice.from_stored('').kind
        <ToneChoiceKind.CLEARED: 'cleared'>

        >>> ToneChoice.from_stored('medium-light').tone
        <EmojiSkinTone.MEDIUM_LIGHT: 'medium-light'>

        >>> ToneChoice.from_stored('chartreuse').kind
        <ToneChoiceKind.NO_PREFERENCE: 'no-preference'>
        '''
        if value is None:
            return cls.no_preference()
        try:
            return cls.of(EmojiSkinTone.from_token(value))
        except InvalidToneToken as error:
            LOGGER.warning('Ignoring persisted skin tone: %s', error)
            return cls.no_preference()

    def to_stored(self) -> Optional[str]:
        '''Encodes the choice for a tone store, None means “remove the key”'''
        if self.kind is ToneChoiceKind.NO_PREFERENCE:
            return None
        if self.kind is ToneChoiceKind.CLEARED or self.tone is None:
            return ''
        return self.tone.token

def resolve_tone(emoji: Emoji, tone: Optional[EmojiSkinTone]) -> Emoji:
    '''Returns the variant of an emoji with the skin tone “tone”

    If the emoji does not support skin tones, it is returned unchanged.
    None and EmojiSkinTone.DEFAULT both give the default rendering.

    :param emoji: The emoji
    :param tone: The skin tone to apply

    Examples:

    >>> from emoji_catalog.ec_catalog import EmojiCategory
    >>> thumbs_up = Emoji('👍', 'thumbs up', EmojiCategory.PEOPLE_AND_BODY,
    ...                   supports_skin_tones=True)
    >>> resolve_tone(thumbs_up, EmojiSkinTone.MEDIUM_DARK).glyph
    '👍🏾'
    >>> resolve_tone(thumbs_up, EmojiSkinTone.DEFAULT) == thumbs_up
    True
    >>> grinning = Emoji('😀', 'grinning face',
    ...                  EmojiCategory.SMILEYS_AND_EMOTION)
    >>> resolve_tone(grinning, EmojiSkinTone.DARK) is grinning
    True
    '''
    if not emoji.supports_skin_tones:
        return emoji
    if tone is EmojiSkinTone.DEFAULT:
        tone = None
    if emoji.skin_tone is tone:
        return emoji
    return replace(emoji, skin_tone=tone)

def base_emoji(emoji: Emoji) -> Emoji:
    '''Returns the emoji with the default (yellow) rendering'''
    return resolve_tone(emoji, None)

def apply_choice(
        emoji: Emoji,
        choice: ToneChoice,
        default_tone: Optional[EmojiSkinTone] = None) -> Emoji:
    '''Applies a persisted choice, falling back to default_tone

    :param emoji: The emoji as it comes from the dataset
    :param choice: The persisted preference for this emoji
    :param default_tone: The configured default skin tone, if any
    '''
    if choice.kind is ToneChoiceKind.TONE:
        return resolve_tone(emoji, choice.tone)
    if choice.kind is ToneChoiceKind.CLEARED:
        return resolve_tone(emoji, None)
    if default_tone is not None:
        return resolve_tone(emoji, default_tone)
    return emoji

def apply_persisted_or_default(
        emoji: Emoji,
        persisted: Dict[str, str],
        default_tone: Optional[EmojiSkinTone] = None) -> Emoji:
    '''Applies the persisted skin tone of an emoji or the default tone

    :param emoji: The emoji as it comes from the dataset
    :param persisted: Mapping from emoji identity to tone token as
                      returned by ToneStore.get_all()
    :param default_tone: The configured default skin tone, if any

    Examples:

    >>> from emoji_catalog.ec_catalog import EmojiCategory
    >>> wave = Emoji('👋', 'waving hand', EmojiCategory.PEOPLE_AND_BODY,
    ...              supports_skin_tones=True)
    >>> apply_persisted_or_default(
    ...     wave, {'waving hand': 'light'}, EmojiSkinTone.DARK).glyph
    '👋🏻'
    >>> apply_persisted_or_default(
    ...     wave, {'waving hand': ''}, EmojiSkinTone.DARK).glyph
    '👋'
    >>> apply_persisted_or_default(wave, {}, EmojiSkinTone.DARK).glyph
    '👋🏿'
    >>> apply_persisted_or_default(wave, {}, None) is wave
    True
    '''
    if not emoji.supports_skin_tones:
        return emoji
    return apply_choice(
        emoji, ToneChoice.from_stored(persisted.get(emoji.identity)),
        default_tone)

def persist(
        store: ToneStore,
        identity: str,
        tone: Optional[EmojiSkinTone]) -> None:
    '''Persists the skin tone the user chose for an emoji

    None or EmojiSkinTone.DEFAULT persist an explicit choice of the
    default rendering, which is different from never having chosen
    anything: a configured default skin tone is not applied to it.

    :param store: The tone store
    :param identity: The identity of the base emoji
    :param tone: The chosen skin tone
    '''
    token = ToneChoice.of(tone).to_stored()
    LOGGER.debug('Persisting skin tone %r for “%s”', token, identity)
    store.set(identity, token or '')

def clear_all(store: ToneStore) -> None:
    '''Forgets all persisted skin tones

    Afterwards the configured default skin tone applies to every emoji
    again.
    '''
    LOGGER.debug('Clearing all persisted skin tones')
    store.clear()

def skin_tone_variants(emoji: Emoji) -> List[Emoji]:
    '''Returns all skin tone variants of an emoji

    The first variant is the default rendering. If the emoji does not
    support skin tones, a list containing only the emoji is returned.

    Examples:

    >>> from emoji_catalog.ec_catalog import EmojiCategory
    >>> clap = Emoji('👏', 'clapping hands', EmojiCategory.PEOPLE_AND_BODY,
    ...              supports_skin_tones=True)
    >>> [variant.glyph for variant in skin_tone_variants(clap)]
    ['👏', '👏🏻', '👏🏼', '👏🏽', '👏🏾', '👏🏿']
    '''
    if not emoji.supports_skin_tones:
        return [emoji]
    return [resolve_tone(emoji, tone) for tone in EmojiSkinTone]
