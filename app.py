"""
app.py — prints the statement for a sample invoice.

Run it directly:
    python app.py

Or, with the same data as JSON:
    theater statement tests/golden/plays.json tests/golden/invoices.json
"""

from theater import Genre, Invoice, Performance, Play, PlayCatalog, generate

if __name__ == "__main__":
    catalog = PlayCatalog(
        {
            "hamlet": Play("Hamlet", Genre.TRAGEDY),
            "as-like": Play("As You Like It", Genre.COMEDY),
            "othello": Play("Othello", Genre.TRAGEDY),
        }
    )
    invoice = Invoice(
        "BigCo",
        [
            Performance("hamlet", 55),   # → $650.00, 25 credits
            Performance("as-like", 35),  # → $580.00, 12 credits
            Performance("othello", 40),  # → $500.00, 10 credits
        ],
    )
    print(generate(invoice, catalog), end="")
