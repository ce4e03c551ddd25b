"""Domain layer: parameter entities and error services"""
