"""
Domain layer.

Pure business objects and contracts. No framework imports allowed.
"""
