"""
Arena scoring core.

Pure Python scoring sheets for arena tournaments. Nothing in this package
touches the database; Django only hosts it as an installed app.
"""
