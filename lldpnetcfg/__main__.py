#!/usr/bin/env python3
"""
lldp-netcfg - Entry point for `python -m lldpnetcfg`
Copyright (C) 2025  Dorin Badea
GPLv3 License
"""

from lldpnetcfg.cli import main

if __name__ == "__main__":
    main()
