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

'''Stores for the skin tones chosen by the user

A tone store maps the identity of a base emoji (its description) to
a skin tone token. The empty string as a value means that the user
explicitly chose the default skin tone, a missing key means that the
user never chose anything for that emoji.

The host application owns the store and passes it to the engine,
nothing else in emoji-catalog persists state.
'''

from typing import Dict
from typing import Optional
import os
import ast
import logging
import urllib.parse

from emoji_catalog import ec_util

IMPORT_GLIB_SUCCESSFUL = False
try:
    from gi import require_version # type: ignore
    require_version('GLib', '2.0')
    from gi.repository import GLib # type: ignore
    IMPORT_GLIB_SUCCESSFUL = True
except (ImportError, ValueError):
    IMPORT_GLIB_SUCCESSFUL = False

LOGGER = logging.getLogger('emoji-catalog')

SKIN_TONES_BASENAME = 'skin-tones'

class ToneStore():
    '''Base class of tone stores

    Subclasses implement get_all(), set_all() and clear().
    '''
    def get_all(self) -> Dict[str, str]:
        '''Returns a copy of all persisted entries'''
        raise NotImplementedError

    def set_all(self, tones: Dict[str, str]) -> None:
        '''Replaces all persisted entries

        :param tones: Mapping of emoji identity to skin tone token
        '''
        raise NotImplementedError

    def clear(self) -> None:
        '''Removes all entries'''
        self.set_all({})

    def get(self, identity: str) -> Optional[str]:
        '''Returns the token stored for identity or None if there is none'''
        return self.get_all().get(identity)

    def set(self, identity: str, token: str) -> None:
        '''Stores a token for identity'''
        tones = self.get_all()
        tones[identity] = token
        self.set_all(tones)

class MemoryToneStore(ToneStore):
    '''A tone store which lives only as long as the process

    Examples:

    >>> store = MemoryToneStore({'thumbs up': 'dark'})
    >>> store.set('waving hand', '')
    >>> sorted(store.get_all().items())
    [('thumbs up', 'dark'), ('waving hand', '')]
    >>> store.get('clapping hands') is None
    True
    >>> store.clear()
    >>> store.get_all()
    {}
    '''
    def __init__(self, tones: Optional[Dict[str, str]] = None) -> None:
        self._tones: Dict[str, str] = dict(tones or {})

    def get_all(self) -> Dict[str, str]:
        return dict(self._tones)

    def set_all(self, tones: Dict[str, str]) -> None:
        self._tones = dict(tones)

    def clear(self) -> None:
        self._tones = {}

def default_store_path() -> str:
    '''Returns “~/.local/share/emoji-catalog/skin-tones” by default'''
    return os.path.join(
        ec_util.xdg_save_data_path('emoji-catalog'), SKIN_TONES_BASENAME)

class FileToneStore(ToneStore):
    '''A tone store saved as a Python literal in a file

    The file is read once when the store is created and written
    whenever the store changes. If the file cannot be read, the
    store starts empty.
    '''
    def __init__(self, path: str = '') -> None:
        '''
        :param path: The file to use, if empty default_store_path()
        '''
        self._path = path or default_store_path()
        self._tones: Dict[str, str] = {}
        self._read()

    @property
    def path(self) -> str:
        '''The file the store is saved in'''
        return self._path

    def _read(self) -> None:
        '''Reads the persisted skin tones from the file'''
        tones = {}
        if os.path.isfile(self._path):
            try:
                with open(self._path,
                          mode='r',
                          encoding='UTF-8') as tones_file:
                    tones = ast.literal_eval(tones_file.read())
            except (PermissionError, SyntaxError, ValueError) as error:
                LOGGER.exception('Error reading skin tones: %s: %s',
                                 error.__class__.__name__, error)
            except Exception as error: # pylint: disable=broad-except
                LOGGER.exception(
                    'Unexpected error reading skin tones: %s: %s',
                    error.__class__.__name__, error)
            else: # no exception occured
                LOGGER.debug('File %s has been read and evaluated.',
                             self._path)
            finally: # executes always
                if not isinstance(tones, dict):
                    LOGGER.warning(
                        'Not a dict: repr(tones) = %s', repr(tones))
                    tones = {}
        self._tones = {
            key: value for key, value in tones.items()
            if isinstance(key, str) and isinstance(value, str)}
        if len(self._tones) != len(tones):
            LOGGER.warning(
                'Ignored %s entries which are not strings in %s',
                len(tones) - len(self._tones), self._path)

    def _save(self) -> None:
        '''Writes the persisted skin tones to the file'''
        directory = os.path.dirname(self._path)
        if directory and not os.path.isdir(directory):
            os.makedirs(directory, exist_ok=True)
        with open(self._path,
                  mode='w',
                  encoding='UTF-8') as tones_file:
            tones_file.write(repr(self._tones))
            tones_file.write('\n')

    def get_all(self) -> Dict[str, str]:
        return dict(self._tones)

    def set_all(self, tones: Dict[str, str]) -> None:
        self._tones = dict(tones)
        self._save()

class KeyFileToneStore(ToneStore):
    '''A tone store saved as a GLib key file

    Needs PyGObject. The entries are saved in the group “SkinTones”,
    the keys are URI escaped because emoji descriptions may contain
    characters which are not allowed in key file keys.
    '''
    GROUP = 'SkinTones'

    def __init__(self, path: str = '') -> None:
        if not IMPORT_GLIB_SUCCESSFUL:
            raise RuntimeError('KeyFileToneStore needs PyGObject (gi)')
        self._path = path or default_store_path() + '.ini'
        self._key_file = GLib.KeyFile.new()
        if os.path.isfile(self._path):
            try:
                self._key_file.load_from_file(
                    self._path, GLib.KeyFileFlags.NONE)
            except GLib.Error as error: # pylint: disable=catching-non-exception
                LOGGER.exception('Error reading skin tones from %s: %s',
                                 self._path, error)
                self._key_file = GLib.KeyFile.new()

    @property
    def path(self) -> str:
        '''The file the store is saved in'''
        return self._path

    def get_all(self) -> Dict[str, str]:
        if not self._key_file.has_group(self.GROUP):
            return {}
        (keys, _length) = self._key_file.get_keys(self.GROUP)
        return {
            urllib.parse.unquote(key): self._key_file.get_string(
                self.GROUP, key)
            for key in keys}

    def set_all(self, tones: Dict[str, str]) -> None:
        if self._key_file.has_group(self.GROUP):
            self._key_file.remove_group(self.GROUP)
        for identity, token in tones.items():
            self._key_file.set_string(
                self.GROUP, urllib.parse.quote(identity, safe=' '), token)
        directory = os.path.dirname(self._path)
        if directory and not os.path.isdir(directory):
            os.makedirs(directory, exist_ok=True)
        self._key_file.save_to_file(self._path)
