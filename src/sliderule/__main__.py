"""Entry point for ``python -m sliderule``."""
from sliderule.main import main

if __name__ == "__main__":
    main()
