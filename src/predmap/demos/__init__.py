"""Demo consumers of predicate maps, exposed through the ``predmap`` CLI.

- ``fizzbuzz``: every-match lookup, labels joined per number
- ``faults``: first-match lookup that classifies caught exceptions
"""
