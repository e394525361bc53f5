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
Command line interface of emoji-catalog.

Browses and searches the emoji catalog and manages the persisted
skin tones, mostly useful to test datasets and stores.
'''

from typing import Any
from typing import List
from typing import Optional
from typing import Sequence
import sys
import locale
import argparse
import logging

from emoji_catalog import ec_util
from emoji_catalog import ec_version
from emoji_catalog.ec_catalog import DEFAULT_CATEGORIES
from emoji_catalog.ec_catalog import DatasetCorrupt
from emoji_catalog.ec_catalog import DatasetUnavailable
from emoji_catalog.ec_catalog import EmojiCategory
from emoji_catalog.ec_catalog import EmojiSkinTone
from emoji_catalog.ec_catalog import InvalidToneToken
from emoji_catalog.ec_picker import EmojiPicker
from emoji_catalog.ec_sections import ANY_PLATFORM_VERSION
from emoji_catalog.ec_sections import SectionConfig
from emoji_catalog.ec_store import FileToneStore

LOGGER = logging.getLogger('emoji-catalog')

def parse_args(argv: Optional[Sequence[str]] = None) -> Any:
    '''
    Parse the command line arguments.
    '''
    parser = argparse.ArgumentParser(
        prog='emoji-catalog',
        description='Browse and search the emoji catalog')
    parser.add_argument(
        '-s', '--search',
        nargs='?',
        type=str,
        action='store',
        default=None,
        help=('Print the emoji matching this query, '
              'the most relevant first.'))
    parser.add_argument(
        '-l', '--list-sections',
        action='store_true',
        default=False,
        help=('Print all sections with their emoji. '
              'Without this option only the section titles and '
              'the number of emoji in each section are printed. '
              'default: %(default)s'))
    parser.add_argument(
        '-p', '--platform-version',
        nargs='?',
        type=str,
        action='store',
        default=ANY_PLATFORM_VERSION,
        help=('Leave out emoji which need a newer platform version '
              'than this. default: "%(default)s"'))
    parser.add_argument(
        '-t', '--default-tone',
        nargs='?',
        type=str,
        action='store',
        default='',
        help=('Skin tone to use for emoji without a persisted '
              'skin tone. One of: '
              + ', '.join(tone.token for tone in EmojiSkinTone if tone.token)
              + '. If empty, the default rendering is used. '
              'default: "%(default)s"'))
    parser.add_argument(
        '-c', '--categories',
        nargs='?',
        type=str,
        action='store',
        default='',
        help=('Colon separated list of the categories to show in this '
              'order. For example "flags:symbols" would show only '
              'flags and symbols. Categories are named by their '
              'dataset group name or by their enum name, e.g. '
              '"Food & Drink" or "food_and_drink". '
              'If empty, all categories are shown.'))
    parser.add_argument(
        '--keep-scan-order',
        action='store_true',
        default=False,
        help=('Order the sections by the first appearance of their '
              'category in the dataset instead of by --categories. '
              'default: %(default)s'))
    parser.add_argument(
        '--persist',
        nargs=2,
        metavar=('DESCRIPTION', 'TONE'),
        default=None,
        help=('Persist a skin tone for the emoji with this description. '
              'Use "" as TONE to persist the default rendering.'))
    parser.add_argument(
        '--clear-tones',
        action='store_true',
        default=False,
        help=('Forget all persisted skin tones. '
              'default: %(default)s'))
    parser.add_argument(
        '--store-file',
        nargs='?',
        type=str,
        action='store',
        default='',
        help=('File to persist skin tones in. '
              'If empty, "~/.local/share/emoji-catalog/skin-tones" '
              'is used.'))
    parser.add_argument(
        '--dataset',
        nargs='?',
        type=str,
        action='store',
        default='',
        help=('Emoji dataset to use instead of the bundled one.'))
    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        default=False,
        help=('Print debug output to stderr. '
              'default: %(default)s'))
    parser.add_argument(
        '--version',
        action='store_true',
        default=False,
        help=('Output version information and exit. '
              'default: %(default)s'))
    return parser.parse_args(argv)

def parse_category(name: str) -> EmojiCategory:
    '''Parses a category given on the command line

    Examples:

    >>> parse_category('Food & Drink')
    <EmojiCategory.FOOD_AND_DRINK: 'Food & Drink'>

    >>> parse_category('flags')
    <EmojiCategory.FLAGS: 'Flags'>

    >>> parse_category('people_and_body')
    <EmojiCategory.PEOPLE_AND_BODY: 'People & Body'>
    '''
    for category in EmojiCategory:
        if name.lower() in (category.value.lower(), category.name.lower()):
            return category
    raise ValueError(f'Unknown category: {name!r}')

def config_from_args(args: Any) -> SectionConfig:
    '''Creates the section configuration from the command line arguments

    :raises ValueError: if a category or the skin tone is unknown
    '''
    categories = tuple(
        parse_category(name)
        for name in ec_util.split_colon_list(args.categories))
    default_tone: Optional[EmojiSkinTone] = None
    if args.default_tone:
        default_tone = EmojiSkinTone.from_token(args.default_tone)
    return SectionConfig(
        categories=categories or DEFAULT_CATEGORIES,
        default_tone=default_tone,
        platform_version=args.platform_version,
        keep_scan_order=args.keep_scan_order)

def init_logging(debug: bool) -> None:
    '''Sets up logging for the command line program'''
    log_handler: logging.Handler
    if not debug:
        log_handler = logging.NullHandler()
    else:
        log_handler = logging.StreamHandler(stream=sys.stderr)
        log_formatter = logging.Formatter(
            '%(asctime)s %(filename)s '
            'line %(lineno)d %(funcName)s %(levelname)s: '
            '%(message)s')
        log_handler.setFormatter(log_formatter)
        LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(log_handler)
    LOGGER.info('********** STARTING **********')

def _persist(picker: EmojiPicker, description: str, token: str) -> None:
    '''Persists a skin tone for the emoji with this description

    :raises ValueError: if there is no such emoji or the tone is unknown
    '''
    tone = EmojiSkinTone.from_token(token)
    for emoji in picker.get_all_emoji():
        if emoji.identity == description:
            if not emoji.supports_skin_tones:
                LOGGER.warning(
                    '“%s” does not support skin tones', description)
            picker.persist_tone(emoji, tone)
            return
    raise ValueError(f'No emoji with description {description!r}')

def main(argv: Optional[Sequence[str]] = None) -> int:
    '''
    Runs the command line program and returns the exit status.
    '''
    args = parse_args(argv)
    init_logging(args.debug)
    try:
        locale.setlocale(locale.LC_ALL, '')
    except locale.Error:
        LOGGER.error("Using the fallback 'C' locale")
        locale.setlocale(locale.LC_ALL, 'C')

    if args.version:
        print(ec_version.get_version())
        return 0

    try:
        config = config_from_args(args)
    except (ValueError,) as error:
        print(f'emoji-catalog: {error}', file=sys.stderr)
        return 2

    picker = EmojiPicker(
        store=FileToneStore(args.store_file),
        config=config,
        dataset_path=args.dataset)
    try:
        if args.clear_tones:
            picker.clear_persisted_tones()
        if args.persist:
            _persist(picker, args.persist[0], args.persist[1])
        sections = picker.get_default_sections()
    except (DatasetUnavailable, DatasetCorrupt) as error:
        print(f'emoji-catalog: {error}', file=sys.stderr)
        return 1
    except (InvalidToneToken, ValueError) as error:
        print(f'emoji-catalog: {error}', file=sys.stderr)
        return 2

    lines: List[str] = []
    if args.search is not None:
        results = picker.get_search_results(args.search, sections)
        section = picker.search_results_section(results)
        lines.append(f'{section.title} ({len(section)})')
        for emoji in section.emojis:
            lines.append(f'{emoji.glyph}\t{emoji.description}')
    else:
        for section in sections:
            lines.append(f'{section.icon} {section.title} ({len(section)})')
            if args.list_sections:
                lines.append(
                    ' '.join(emoji.glyph for emoji in section.emojis))
    print('\n'.join(lines))
    return 0

if __name__ == '__main__':
    sys.exit(main())
