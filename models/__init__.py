"""
Hotel booking engine.
Room inventory, pricing, reservation ids, allocation and the booking ledger.
"""
