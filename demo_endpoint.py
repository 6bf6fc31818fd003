"""
Quick demo script to run the Credit Assist API locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Credit Assist Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Credit Score:  POST http://localhost:8000/ai/credit-score")
    print("   - Bill Parse:    POST http://localhost:8000/ai/bill-parse")
    print("   - Ask Nidhi:     POST http://localhost:8000/ai/literacy")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("🔐 Demo login (no password):")
    print('   curl -X POST "http://localhost:8000/auth/login" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"email": "beneficiary@example.com"}\'')
    print("   Then send Authorization: Bearer <session_token>")
    print()
    print("📝 Upload a bill:")
    print('   curl -X POST "http://localhost:8000/bills/image" \\')
    print('     -H "Authorization: Bearer <session_token>" \\')
    print('     -F "image=@/path/to/receipt.jpg"')
    print('   curl -X POST "http://localhost:8000/bills/parse" -H "Authorization: Bearer <session_token>"')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "credit_assist.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
