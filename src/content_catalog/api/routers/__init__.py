"""API routers package.

Each router module owns one API resource and delegates to
``content_catalog.ops`` for the behaviour behind it.

Tags:
    content-catalog, api, routers, REST

Doc-Types:
    api-reference
"""
