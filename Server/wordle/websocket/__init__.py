"""
WebSocket Package

Real-time key press handling for the browser client.
"""
