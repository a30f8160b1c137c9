"""Application configuration"""
