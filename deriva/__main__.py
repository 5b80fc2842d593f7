"""
Punto de entrada: python -m deriva
"""

from deriva.cli.app import app

if __name__ == "__main__":
    app()
