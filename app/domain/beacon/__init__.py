"""
Beacon bounded context: domain layer.

Canonical chromosome and assembly vocabularies, the allele request
value object, and the normalization rules applied to incoming queries.
"""
