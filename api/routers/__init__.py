"""
API Routers - Organized endpoint handlers for the Circles API.

Each router handles a specific domain:
- users: Register users, fetch profiles, connection recommendations
- connections: Create typed connections between users
- interests: Look up users by interest
- graph: Whole-graph statistics
"""
