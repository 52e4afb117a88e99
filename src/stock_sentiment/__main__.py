"""
Main entry point for running stock_sentiment as a module.

Usage:
    python -m stock_sentiment AAPL,MSFT
"""

from stock_sentiment.main import app

if __name__ == "__main__":
    app()
