"""
Balance View — transaction balance-change resolution for Sui.

Takes a finalized transaction record and derives the per-account balance
changes a user should see, with the execution fee folded into outgoing
amounts and a best-effort pick of the change that matters to the viewer.
"""

__version__ = "0.1.0"
