"""Application layer: startup and error orchestration"""
