"""
Development Server Runner
Run this file for development
"""

from app import app
from config import Config

if __name__ == '__main__':
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG
    )
