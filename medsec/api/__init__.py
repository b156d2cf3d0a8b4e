"""
MedSec - API Module
HTTP surface over the threat classification engine
"""
