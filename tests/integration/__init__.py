"""
API test package for the reference company service.

Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Error handling testing
"""
