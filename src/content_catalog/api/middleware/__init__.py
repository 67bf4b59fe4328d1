"""API middleware package.

Cross-cutting concerns (request ids, timing, error mapping) live here so
the contents router stays focused on translating service results.

Tags:
    content-catalog, api, middleware, cross-cutting

Doc-Types:
    api-reference
"""
