"""Documentation snippets generated from test calls.

Import from the submodules (``client``, ``constraints``, ``descriptors``,
``documentation``, ``snippets``); this package is also a Django app so its
snippet templates are found by the app-directories loader.
"""
