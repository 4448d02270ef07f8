"""
Frontend Layer

Screen state, user interaction contracts and view models for the meme grid.
"""
