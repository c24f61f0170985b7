"""Shared fixtures for unit tests."""

import pytest


@pytest.fixture
def page_html() -> bytes:
    """A small page with headings, links and images."""
    return b"""
    <!DOCTYPE HTML>
    <html>
    <head>
        <title>Testing</title>
    </head>
    <body>
        <h1 id="title">Testing</h1>
        <a href="/" class="home link">Home</a>
        <section>
            <a href="https://golang.org" alt="golang" class="link">Golang</a>
        </section>
        <div>
            <img src="cat.jpeg">
            <span>
                <img src="btn.png">
            </span>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def scenario_html() -> bytes:
    """Heading followed by two links sharing the "link" class."""
    return (
        b'<h1 id="title">Testing</h1>'
        b'<a href="/" class="home link">Home</a>'
        b'<a href="https://x.org" class="link">X</a>'
    )
