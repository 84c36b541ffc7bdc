#!/usr/bin/env python3
"""Contact Model CLI launcher script.

This script serves as the main entry point for the contact-model command.
It can be installed as a console script via setuptools.
"""

from contact_model.cli.app import main

if __name__ == "__main__":
    main()
