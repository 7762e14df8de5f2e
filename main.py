"""This module starts the two-room dungeon game."""

import sys

from tunnelcrawl.__main__ import main

#############################################
# Initialization & Main Loop
#############################################

sys.exit(main())
