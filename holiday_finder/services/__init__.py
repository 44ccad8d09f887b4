"""
Services for the holiday lookup page.

These modules hold the logic shared by the web routes and the CLI:
the Nager.Date client, the page model, and the components that
populate and render it.
"""
