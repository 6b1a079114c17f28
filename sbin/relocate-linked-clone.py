#!/usr/bin/env python3

#
#	Relocate a linked clone using a disk move type.  See
#	lib/python3/vmrelocate.py for the options.
#

import sys
import os

sys.path.append(os.path.dirname(os.path.realpath(__file__)) + '/../lib/python3')

import vmrelocate


vmrelocate.run()
