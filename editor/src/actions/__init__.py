"""Action handlers for the main window (composition pattern)"""
