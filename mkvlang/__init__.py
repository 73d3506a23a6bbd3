#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright: (c) 2013 William Forde (willforde@gmail.com)
# License: GPLv3, see LICENSE for more details
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""
Welcome to mkvlang. This script goes through a folder of mkv files and removes
every audio track that isn't in the chosen language, by remuxing each file
with mkvmerge and replacing the original with the result.

This python script has the following requirements:
1.  Mkvtoolnix
2.  Python3

Note:
Files are processed one at a time, in name order. Only the top level of the
folder is searched. By default the run stops at the first file that fails,
files that were already done stay done.

For help with the command line parameters use the -h parameter.
"""

__version__ = "1.0.0"
