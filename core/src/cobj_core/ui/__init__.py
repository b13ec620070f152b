"""Server-rendered pages for browsing and adding custom object records.

- served by the FastAPI app, templates rendered with Jinja2
- plain HTML form + redirect, no client-side scripting
"""
