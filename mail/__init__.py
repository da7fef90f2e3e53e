"""
mail — outbound transactional email.

Provides:
  • ``SendGridClient`` — async SendGrid v3 client built on httpx
  • ``/api/contact/send`` route
"""
