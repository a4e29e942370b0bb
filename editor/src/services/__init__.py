"""Services: action routing, notifications and collaborator interfaces"""
