"""
Theurgy - Command implementations for praxis.

- query:       nonce, balance, block-number, chain-id
- impersonate: impersonate, stop-impersonating, set-balance
"""
