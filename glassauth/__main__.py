"""Glass Auth entrypoint.

Run with:
  python -m glassauth
"""

from glassauth.app import main

if __name__ == "__main__":
    main()
