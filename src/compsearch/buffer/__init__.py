"""
Component registry for the searchable text buffers.

This package provides the models for components and their controls, and the
registry that turns them into labelled buffers for the search engine.
"""
