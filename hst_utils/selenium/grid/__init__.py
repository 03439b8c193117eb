#
# Copyright Harvester System Tests Authors
# SPDX-License-Identifier: GPL-2.0-or-later
#
#

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 900
