"""Convenience entrypoint for the Streamlit app.

The actual UI lives in ``app/app.py``. This file lets
``streamlit run het_of_de.py`` work from the project root. Streamlit
re-executes this script on every rerun, so the page is rendered by calling
``app.app.render`` each time rather than relying on the import side effect.
"""
from app.app import render


def main() -> None:
    """Render the page for the current Streamlit run."""
    render()


if __name__ == "__main__":
    main()
