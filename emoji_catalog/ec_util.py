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
Utility functions used in emoji-catalog
'''

from typing import Any
from typing import Tuple
from typing import List
from typing import Optional
from typing import Iterable
from typing import Callable
import os
import sys
import re
import gzip
import gettext
import logging

import xdg.BaseDirectory # type: ignore

LOGGER = logging.getLogger('emoji-catalog')

DOMAINNAME = 'emoji-catalog'
_: Callable[[str], str] = lambda a: gettext.dgettext(DOMAINNAME, a)
N_: Callable[[str], str] = lambda a: a

DATADIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

# Version components compared, shorter versions are padded with zeros:
VERSION_COMPONENTS = 3

def xdg_data_path(*resource: str) -> str:
    '''Returns the path of a resource in the user’s XDG data directory

    Unlike xdg_save_data_path(), the directory is not created.

    :param resource: Path components below $XDG_DATA_HOME
    '''
    resource_joined = os.path.join(*resource)
    assert not resource_joined.startswith('/')
    return os.path.join(xdg.BaseDirectory.xdg_data_home, resource_joined)

def xdg_save_data_path(*resource: str) -> str:
    '''Returns the path of a resource in the user’s XDG data directory
    and makes sure that the directory exists.

    xdg.BaseDirectory.save_data_path(*resource) is not used because
    it calls os.makedirs() without exist_ok=True and can then fail
    in a race condition (see: https://bugs.python.org/issue1675)
    '''
    path = xdg_data_path(*resource)
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)
    return path

def user_datadir() -> str:
    '''Returns “~/.local/share/emoji-catalog/data” by default'''
    return xdg_data_path('emoji-catalog', 'data')

def version_tuple(version: str) -> Tuple[int, ...]:
    '''Converts a version string into a tuple of integers

    Only the numbers in the string are used, everything else is
    ignored. The tuple is padded with zeros to have at least
    VERSION_COMPONENTS elements, so that '15' and '15.0.0' compare
    as equal.

    :param version: A version string like '13.1' or '16.0'

    Examples:

    >>> version_tuple('13.1')
    (13, 1, 0)

    >>> version_tuple('16')
    (16, 0, 0)

    >>> version_tuple('')
    (0, 0, 0)

    >>> version_tuple('iOS 17.4.1')
    (17, 4, 1)
    '''
    numbers = [int(number) for number in re.findall(r'\d+', version)]
    numbers += [0] * (VERSION_COMPONENTS - len(numbers))
    return tuple(numbers)

def compare_versions(version_a: str, version_b: str) -> int:
    '''Compares two version strings numerically

    Returns -1, 0, or 1, if version_a is lower than, equal to,
    or greater than version_b.

    Examples:

    A lexicographic comparison would get this wrong:

    >>> compare_versions('9.1', '10.0')
    -1

    >>> compare_versions('13.2', '13.10')
    -1

    >>> compare_versions('15', '15.0')
    0

    >>> compare_versions('16.4', '16.0')
    1
    '''
    tuple_a = version_tuple(version_a)
    tuple_b = version_tuple(version_b)
    if tuple_a < tuple_b:
        return -1
    if tuple_a > tuple_b:
        return 1
    return 0

def find_path_and_open_function(
        dirnames: Iterable[str],
        basenames: Iterable[str],
        subdir: str = '') -> Tuple[str, Optional[Callable[..., Any]]]:
    '''Find the first existing file of a list of basenames and dirnames

    For each file in “basenames”, tries whether that file or the
    file with “.gz” added can be found in the list of directories
    “dirnames” where “subdir” is added to each directory in the list.

    Returns a tuple (path, open_function) where “path” is the
    complete path of the first file found and the open function
    is either “open()” or “gzip.open()”. If nothing is found,
    ('', None) is returned.

    :param dirnames: A list of directories to search in
    :param basenames: A list of file names to search for
    :param subdir: A subdirectory to be added to each directory in the list
    '''
    for basename in basenames:
        for dirname in dirnames:
            path = os.path.join(dirname, subdir, basename)
            if os.path.exists(path):
                if path.endswith('.gz'):
                    return (path, gzip.open)
                return (path, open)
            path = os.path.join(dirname, subdir, basename + '.gz')
            if os.path.exists(path):
                return (path, gzip.open)
    return ('', None)

def open_function_for_path(path: str) -> Callable[..., Any]:
    '''Returns gzip.open() for “.gz” files and open() otherwise'''
    if path.endswith('.gz'):
        return gzip.open
    return open

def split_colon_list(text: str) -> List[str]:
    '''Splits a colon separated command line value

    Examples:

    >>> split_colon_list('flags:symbols')
    ['flags', 'symbols']

    >>> split_colon_list(' flags : :symbols ')
    ['flags', 'symbols']

    >>> split_colon_list('')
    []
    '''
    return [item.strip() for item in text.split(':') if item.strip()]

if __name__ == "__main__":
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    import doctest
    (FAILED, ATTEMPTED) = doctest.testmod()
    sys.exit(FAILED)
