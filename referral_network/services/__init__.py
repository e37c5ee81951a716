"""
Services.

- referral_service: Referral engine facade
- user: Registration and authentication
- admin_service: Export and wipe of all data
"""
