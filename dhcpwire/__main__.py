# SPDX-License-Identifier: MIT

from .v4.monitor import main

raise SystemExit(main())

# vim:set ft=python ts=4 sw=4 ai noet cc=80:
