# SPDX-License-Identifier: CC0-1.0

"""Socket setup that differs between operating systems

Only linux can tie a socket to one device; everywhere else the generic
module binds by address alone and refuses an interface.
"""

__all__ = ['list_ifaces', 'broadcast_listen']

from importlib import import_module
from sys import platform as system

platform = 'linux' if system.startswith('linux') else 'generic'
platform_lib = import_module('.%s' % platform, package=__name__)

list_ifaces = platform_lib.list_ifaces
broadcast_listen = platform_lib.broadcast_listen

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
