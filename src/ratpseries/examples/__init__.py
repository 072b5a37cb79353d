r"""
Index of examples

.. autosummary::

    identities
"""
