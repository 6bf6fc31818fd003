"""
Mock data backing login and the dashboards.

There is no database: users, the beneficiary portfolio and the dashboard
figures below are fixed demo values. Officer review decisions are stored on
the officer's session, never written back here.
"""

from typing import Any, Dict, List

MOCK_USERS: List[Dict[str, str]] = [
    {
        "id": "usr_001",
        "name": "Aarav Sharma (Demo)",
        "email": "beneficiary@example.com",
        "avatar": "https://i.pravatar.cc/150?u=usr_001",
        "role": "beneficiary",
        "region": "Maharashtra",
    },
    {
        "id": "usr_002",
        "name": "Priya Singh (Demo)",
        "email": "officer@example.com",
        "avatar": "https://i.pravatar.cc/150?u=usr_002",
        "role": "officer",
        "region": "National",
    },
    {
        "id": "usr_003",
        "name": "Rohan Gupta (Demo)",
        "email": "admin@example.com",
        "avatar": "https://i.pravatar.cc/150?u=usr_003",
        "role": "admin",
        "region": "National",
    },
    {
        "id": "usr_004",
        "name": "Sunita Devi",
        "email": "sunita.d@example.com",
        "avatar": "https://i.pravatar.cc/150?u=usr_004",
        "role": "beneficiary",
        "region": "Bihar",
    },
    {
        "id": "usr_005",
        "name": "Amit Kumar",
        "email": "amit.k@example.com",
        "avatar": "https://i.pravatar.cc/150?u=usr_005",
        "role": "beneficiary",
        "region": "Uttar Pradesh",
    },
]

MOCK_BENEFICIARY_DATA: Dict[str, Any] = {
    "credit_score": 786,
    "risk_level": "Low",
    "insights": [
        "Excellent repayment history.",
        "Diversified sources of income.",
        "Low credit utilization.",
    ],
    "repayment_schedule": [
        {"id": "pay_01", "due_date": "2024-08-05", "amount": 5000, "status": "Paid"},
        {"id": "pay_02", "due_date": "2024-09-05", "amount": 5000, "status": "Upcoming"},
        {"id": "pay_03", "due_date": "2024-10-05", "amount": 5000, "status": "Upcoming"},
    ],
    "financial_advice": [
        {
            "id": "adv_1",
            "title": "Tip for Rural Entrepreneurs",
            "advice": "Consider using UPI for business transactions to create a digital footprint, which can improve your credit score.",
        },
        {
            "id": "adv_2",
            "title": "Saving for a Rainy Day",
            "advice": "Try to save at least 10% of your monthly income in a separate savings account for emergencies.",
        },
        {
            "id": "adv_3",
            "title": "Understanding Interest",
            "advice": "Always check the interest rate on any loan. A lower rate can save you a lot of money over time.",
        },
    ],
}

MOCK_BENEFICIARIES_LIST: List[Dict[str, Any]] = [
    {
        "id": "ben_01", "name": "Aarav Sharma", "region": "Maharashtra", "score": 786,
        "risk": "Low", "loan_stage": "Active",
        "risk_factors": ["Consistent on-time repayments", "Stable monthly income"],
    },
    {
        "id": "ben_02", "name": "Diya Patel", "region": "Gujarat", "score": 650,
        "risk": "Medium", "loan_stage": "Active",
        "risk_factors": ["Seasonal income fluctuations", "One delayed payment in last 6 months"],
    },
    {
        "id": "ben_03", "name": "Kiran Reddy", "region": "Andhra Pradesh", "score": 520,
        "risk": "High", "loan_stage": "Defaulted",
        "risk_factors": ["Missed three consecutive repayments", "High discretionary spending"],
    },
    {
        "id": "ben_04", "name": "Suresh Kumar", "region": "Uttar Pradesh", "score": 710,
        "risk": "Low", "loan_stage": "Approved",
        "risk_factors": ["Regular utility bill payments"],
    },
    {
        "id": "ben_05", "name": "Meena Kumari", "region": "Bihar", "score": 680,
        "risk": "Medium", "loan_stage": "Verification",
        "risk_factors": ["Limited credit history", "Income documents pending verification"],
    },
    {
        "id": "ben_06", "name": "Rajesh Singh", "region": "Rajasthan", "score": 810,
        "risk": "Low", "loan_stage": "Active",
        "risk_factors": ["Long-standing savings account", "Diversified income"],
    },
    {
        "id": "ben_07", "name": "Anita Das", "region": "West Bengal", "score": 590,
        "risk": "High", "loan_stage": "Active",
        "risk_factors": ["Rising debt-to-income ratio", "Irregular repayments"],
    },
    {
        "id": "ben_08", "name": "Vijay Iyer", "region": "Tamil Nadu", "score": 750,
        "risk": "Low", "loan_stage": "Approved",
        "risk_factors": ["Stable salaried employment"],
    },
]

MOCK_ADMIN_FORECAST: List[Dict[str, Any]] = [
    {"month": "Aug", "score": 715},
    {"month": "Sep", "score": 718},
    {"month": "Oct", "score": 721},
    {"month": "Nov", "score": 725},
    {"month": "Dec", "score": 728},
    {"month": "Jan", "score": 730},
]
