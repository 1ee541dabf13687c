"""
caseview

Search, filtering, sorting, pagination and selection for the list screens of
a therapy practice's administration.
"""
