"""Package entry point for ``python -m globasa_ipa``.

WHY: Users run the transcriber as ``python -m globasa_ipa poem.txt`` or
``echo "Hej" | python -m globasa_ipa``. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from globasa_ipa.cli import main

if __name__ == "__main__":
    main()
