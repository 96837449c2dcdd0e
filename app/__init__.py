"""
Metro Booking Backend
"""
