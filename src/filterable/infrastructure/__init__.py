"""Infrastructure layer: text comparison and field extraction.

Stateless helpers behind the Matchable contract.
"""
