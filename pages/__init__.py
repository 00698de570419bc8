"""
Pages App

Server-rendered marketing site: the single-page home (hero, services,
about, contact) and the style guide.
"""
