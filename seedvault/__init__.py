"""
SeedVault
Copyright (c) 2025

THREAT MODEL:
SeedVault keeps a wallet recovery phrase encrypted on the local device with a
key derived from a user password. It does not protect against malware or
anyone with control of the running machine, and it never transmits the
phrase. Balance lookups only send public addresses to the balance API.
"""
