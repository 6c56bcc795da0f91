#!/usr/bin/env python
"""Script to run the collection reminder scheduler."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the reminder scheduler in the foreground.

    Uses the custom 'runscheduler' command, which starts the periodic
    reminder job and blocks until interrupted.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "reminder_service.settings")
    execute_from_command_line([sys.argv[0], "runscheduler"])


if __name__ == "__main__":
    main()
