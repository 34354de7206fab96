"""Class attendance package.

Feature modules (documents, roster, attendance, statistics, storage) keep the
domain logic; the Flask layer only serves the shared document.
"""
