"""
Cardio Advisor backend.

Turns a patient cardiovascular profile into draft clinical recommendations
for physician review, using Google Gemini with a structured output contract.
"""
