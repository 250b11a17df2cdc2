"""Headless automated-player games"""
