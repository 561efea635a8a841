"""Platform entrypoints"""
