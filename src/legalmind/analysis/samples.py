"""Sample document text used by the demo CLI and tests."""

SAMPLE_LICENSE_AGREEMENT = """
SOFTWARE LICENSE AGREEMENT

This Software License Agreement ("Agreement") is entered into as of February 1, 2024, between CloudTech Solutions Inc., a Delaware corporation ("Licensor"), and GlobalCorp LLC, a Delaware limited liability company ("Licensee").

1. GRANT OF LICENSE
Subject to the terms and conditions of this Agreement, Licensor hereby grants to Licensee a non-exclusive, non-transferable license to use the Software.

2. TERM
This Agreement shall commence on the Effective Date and shall continue for a period of five (5) years, unless earlier terminated in accordance with the provisions hereof.

3. FEES AND PAYMENT
Licensee shall pay Licensor an annual license fee of Seventy-Five Thousand Dollars ($75,000), payable in advance on February 1st of each year.

4. TERMINATION
Either party may terminate this Agreement upon thirty (30) days written notice for convenience. Licensor may terminate immediately upon material breach by Licensee.

5. LIABILITY
LICENSOR'S TOTAL LIABILITY SHALL NOT EXCEED THE AMOUNT OF FEES PAID BY LICENSEE IN THE TWELVE (12) MONTHS PRECEDING THE CLAIM.

6. GOVERNING LAW
This Agreement shall be governed by and construed in accordance with the laws of the State of Delaware.

IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above.
"""
