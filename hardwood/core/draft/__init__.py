"""
Draft system.

Import from the submodules: `picks` for pick ownership and value,
`prospects` for draft classes and selection, `order` for draft order.
"""
