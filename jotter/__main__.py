# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

import sys

from jotter.cli import main

sys.exit(main())
