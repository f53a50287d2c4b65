"""
Desktop entry point
 - Single responsibility: Launch the view switcher demo
 - Imports and calls desktop_ui.app.main()
"""
import sys
from desktop_ui.app import main

if __name__ == "__main__":
    sys.exit(main())
