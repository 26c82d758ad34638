"""Core domain layer: entities, value objects, exceptions and interfaces"""
