"""
Development runner
==================
Starts TrigMaster straight from a source checkout, without `pip install -e .`.

Usage:
    $ python run.py [--debug] [--log-file trig.log] [--tab physics]
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from trigmaster.app.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
