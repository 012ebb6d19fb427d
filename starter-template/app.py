"""
Foliodash Starter Template
==========================

A ready-to-run Flask application with every Foliodash module enabled.

Run with:
    python app.py

Visit:
    http://localhost:5000/portfolio      - Portfolio listing
    http://localhost:5000/portfolio/add  - Add portfolio item
    http://localhost:5000/signup         - Signup form
"""

from flask import Flask, redirect
from foliodash import FolioDash

from config import Config

app = Flask(__name__)
app.config.from_object(Config)

# Registers the portfolio, signup and health modules
foliodash = FolioDash(app)


@app.route('/')
def index():
    return redirect('/portfolio')


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Foliodash Starter Template")
    print("=" * 60)
    print(f"Content API:     {app.config['API_BASE_URI']}")
    print(f"Portfolio:       http://localhost:5000/portfolio")
    print(f"Signup:          http://localhost:5000/signup")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=5000, debug=True)
