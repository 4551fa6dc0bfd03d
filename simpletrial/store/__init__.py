"""
SimpleTrial Store - Django app holding the DB factor table.
"""
