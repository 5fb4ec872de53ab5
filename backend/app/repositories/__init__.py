"""
Todo API — Persistence Gateway
===============================

What:  The only code that reads or writes the `todo` table.
How:   Each repository wraps one AsyncSession and reports failures as
       PersistenceError tagged with a StoreFailure kind. No business text.
"""
