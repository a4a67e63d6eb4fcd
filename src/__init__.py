"""
Package marker for source code under `src`.
It groups the contract, state and dashboard packages under a stable import path.
"""
