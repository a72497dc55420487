"""Run the API server: python -m curators"""

from curators.main import main

if __name__ == "__main__":
    main()
