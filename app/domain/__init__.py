"""
Domain layer package.

Pure business logic: vocabularies, value objects, normalization rules
and domain errors. No framework imports and no IO.
"""
