"""
Example form schemas.

Each builder returns a fresh schema document (dates are computed at call
time). Use load_example_schema() to get a checked FormSchema.
"""

import re
from datetime import date
from typing import Any, Callable

from schema_forms.guardrails.schema_guardrails import load_schema
from schema_forms.models.schema import FormSchema

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)

YES_NO = [
    {"label": "Yes", "value": "yes"},
    {"label": "No", "value": "no"},
]


def _field(node_id: str, col_span: int = 1) -> dict[str, Any]:
    node: dict[str, Any] = {"kind": "field", "fieldId": node_id}
    if col_span != 1:
        node["colSpan"] = col_span
    return node


def _when(field: str, value: Any) -> dict[str, Any]:
    return {"field": field, "op": "equals", "value": value}


def contact_form() -> dict[str, Any]:
    """Simple contact form."""
    return {
        "id": "contact-form",
        "meta": {"title": "Contact Us", "subtitle": "We'd love to hear from you"},
        "fields": {
            "name": {
                "id": "name",
                "label": "Full Name",
                "renderer": "text",
                "placeholder": "Enter your full name",
                "rules": {
                    "required": "Name is required",
                    "minLength": {"value": 2, "message": "Name must be at least 2 characters"},
                },
            },
            "email": {
                "id": "email",
                "label": "Email Address",
                "renderer": "text",
                "inputType": "email",
                "placeholder": "you@example.com",
                "rules": {
                    "required": "Email is required",
                    "pattern": {"value": EMAIL_PATTERN, "message": "Invalid email address"},
                },
            },
            "subject": {
                "id": "subject",
                "label": "Subject",
                "renderer": "select",
                "placeholder": "Select a subject",
                "props": {
                    "data": [
                        {"label": "General Inquiry", "value": "general"},
                        {"label": "Technical Support", "value": "support"},
                        {"label": "Sales", "value": "sales"},
                        {"label": "Partnership", "value": "partnership"},
                    ]
                },
                "rules": {"required": "Please select a subject"},
            },
            "message": {
                "id": "message",
                "label": "Message",
                "renderer": "textarea",
                "placeholder": "Tell us what's on your mind...",
                "props": {"minRows": 4, "maxRows": 8},
                "rules": {
                    "required": "Message is required",
                    "minLength": {"value": 10, "message": "Message must be at least 10 characters"},
                    "maxLength": {"value": 500, "message": "Message cannot exceed 500 characters"},
                },
            },
            "newsletter": {
                "id": "newsletter",
                "label": "Subscribe to newsletter",
                "renderer": "checkbox",
                "defaultValue": False,
            },
        },
        "layout": [
            {
                "kind": "stack",
                "spacing": "md",
                "children": [
                    _field("name"),
                    _field("email"),
                    _field("subject"),
                    _field("message"),
                    _field("newsletter"),
                ],
            }
        ],
    }


def registration_form() -> dict[str, Any]:
    """User registration with business-only fields and password confirmation."""
    return {
        "id": "user-registration",
        "meta": {"title": "Create Account", "subtitle": "Join our community today"},
        "fields": {
            "firstName": {
                "id": "firstName",
                "label": "First Name",
                "renderer": "text",
                "placeholder": "John",
                "rules": {"required": "First name is required"},
            },
            "lastName": {
                "id": "lastName",
                "label": "Last Name",
                "renderer": "text",
                "placeholder": "Doe",
                "rules": {"required": "Last name is required"},
            },
            "dateOfBirth": {
                "id": "dateOfBirth",
                "label": "Date of Birth",
                "renderer": "date",
                "props": {"maxDate": date.today(), "placeholder": "Pick a date"},
                "rules": {"required": "Date of birth is required"},
            },
            "email": {
                "id": "email",
                "label": "Email",
                "renderer": "text",
                "inputType": "email",
                "placeholder": "you@example.com",
                "rules": {
                    "required": "Email is required",
                    "pattern": {"value": EMAIL_PATTERN, "message": "Invalid email"},
                },
            },
            "password": {
                "id": "password",
                "label": "Password",
                "renderer": "text",
                "inputType": "password",
                "rules": {
                    "required": "Password is required",
                    "minLength": {"value": 8, "message": "Password must be at least 8 characters"},
                    "pattern": {
                        "value": r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)",
                        "message": "Password must contain uppercase, lowercase, and number",
                    },
                },
            },
            "confirmPassword": {
                "id": "confirmPassword",
                "label": "Confirm Password",
                "renderer": "text",
                "inputType": "password",
                "rules": {
                    "required": "Please confirm your password",
                    "validate": lambda value, values: value == values.get("password") or "Passwords don't match",
                },
            },
            "accountType": {
                "id": "accountType",
                "label": "Account Type",
                "renderer": "radio",
                "defaultValue": "personal",
                "props": {
                    "options": [
                        {"label": "Personal", "value": "personal"},
                        {"label": "Business", "value": "business"},
                    ]
                },
                "rules": {"required": "Please select an account type"},
            },
            "companyName": {
                "id": "companyName",
                "label": "Company Name",
                "renderer": "text",
                "placeholder": "Acme Inc.",
                "visibleWhen": _when("accountType", "business"),
                "rules": {"required": "Company name is required for business accounts"},
            },
            "taxId": {
                "id": "taxId",
                "label": "Tax ID / EIN",
                "renderer": "text",
                "placeholder": "XX-XXXXXXX",
                "visibleWhen": _when("accountType", "business"),
                "rules": {
                    "pattern": {"value": r"^\d{2}-\d{7}$", "message": "Invalid Tax ID format (XX-XXXXXXX)"}
                },
            },
            "agreeToTerms": {
                "id": "agreeToTerms",
                "label": "I agree to the Terms of Service and Privacy Policy",
                "renderer": "checkbox",
                "rules": {"required": "You must agree to the terms"},
            },
        },
        "layout": [
            {
                "kind": "section",
                "title": "Personal Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            _field("firstName"),
                            _field("lastName"),
                            _field("dateOfBirth", col_span=2),
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Account Details",
                "withDivider": True,
                "children": [
                    {
                        "kind": "stack",
                        "spacing": "md",
                        "children": [
                            _field("email"),
                            {
                                "kind": "grid",
                                "cols": 2,
                                "spacing": "md",
                                "children": [_field("password"), _field("confirmPassword")],
                            },
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Account Type",
                "withDivider": True,
                "children": [
                    {
                        "kind": "stack",
                        "spacing": "md",
                        "children": [_field("accountType"), _field("companyName"), _field("taxId")],
                    }
                ],
            },
            {"kind": "stack", "spacing": "md", "children": [_field("agreeToTerms")]},
        ],
    }


def agent_update_form() -> dict[str, Any]:
    """Agent profile update with type-dependent identifiers."""
    return {
        "id": "agent-update",
        "meta": {"title": "Update Agent", "subtitle": "Core attributes"},
        "fields": {
            "agent_name": {
                "id": "agent_name",
                "label": "Agent Name",
                "renderer": "text",
                "placeholder": "Enter agent name",
                "rules": {
                    "required": "Agent name is required",
                    "minLength": {"value": 3, "message": "Name must be at least 3 characters"},
                },
            },
            "agent_type": {
                "id": "agent_type",
                "label": "Agent Type",
                "renderer": "select",
                "placeholder": "Select type",
                "props": {
                    "data": [
                        {"label": "Individual", "value": "Individual"},
                        {"label": "Business", "value": "Business"},
                    ]
                },
                "rules": {"required": "Agent type is required"},
            },
            "id_number": {
                "id": "id_number",
                "label": "ID Number",
                "renderer": "text",
                "placeholder": "Enter ID number",
                "visibleWhen": _when("agent_type", "Individual"),
                "rules": {
                    "required": "ID number is required for individuals",
                    "pattern": {"value": r"^\d{7,8}$", "message": "Invalid ID number format"},
                },
            },
            "kra_pin": {
                "id": "kra_pin",
                "label": "KRA PIN",
                "renderer": "text",
                "placeholder": "AXXXXXXXXXX",
                "visibleWhen": _when("agent_type", "Business"),
                "rules": {
                    "required": "KRA PIN is required for businesses",
                    "pattern": {"value": r"^[A-Z0-9]{11}$", "message": "Invalid KRA PIN format"},
                },
            },
            "phone_number": {
                "id": "phone_number",
                "label": "Phone Number",
                "renderer": "text",
                "inputType": "tel",
                "placeholder": "254712345678",
                "rules": {
                    "required": "Phone number is required",
                    "pattern": {"value": r"^254[17]\d{8}$", "message": "Invalid phone number (254XXXXXXXXX)"},
                },
            },
            "email": {
                "id": "email",
                "label": "Email Address",
                "renderer": "text",
                "inputType": "email",
                "placeholder": "agent@example.com",
                "rules": {"pattern": {"value": EMAIL_PATTERN, "message": "Invalid email address"}},
            },
            "location": {
                "id": "location",
                "label": "Location",
                "renderer": "text",
                "placeholder": "Enter location",
            },
            "remarks": {
                "id": "remarks",
                "label": "Remarks",
                "renderer": "textarea",
                "placeholder": "Additional notes...",
                "props": {"minRows": 3, "maxRows": 6},
            },
        },
        "layout": [
            {
                "kind": "section",
                "title": "Profile Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 3,
                        "spacing": "md",
                        "children": [
                            _field("agent_name"),
                            _field("agent_type"),
                            _field("id_number"),
                            _field("kra_pin"),
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Contact Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            _field("phone_number"),
                            _field("email"),
                            _field("location", col_span=2),
                        ],
                    }
                ],
            },
            {"kind": "stack", "spacing": "md", "children": [_field("remarks")]},
        ],
    }


def product_form() -> dict[str, Any]:
    """Product entry with category-specific fields and a discount switch."""
    category_fields = {
        "brand": {
            "id": "brand",
            "label": "Brand",
            "renderer": "text",
            "visibleWhen": _when("category", "electronics"),
            "rules": {"required": "Brand is required for electronics"},
        },
        "warrantyPeriod": {
            "id": "warrantyPeriod",
            "label": "Warranty Period (months)",
            "renderer": "number",
            "visibleWhen": _when("category", "electronics"),
            "props": {"min": 0, "max": 60},
        },
        "size": {
            "id": "size",
            "label": "Size",
            "renderer": "select",
            "visibleWhen": _when("category", "clothing"),
            "props": {"data": ["XS", "S", "M", "L", "XL", "XXL"]},
        },
        "color": {
            "id": "color",
            "label": "Color",
            "renderer": "multiselect",
            "visibleWhen": _when("category", "clothing"),
            "props": {"data": ["Red", "Blue", "Green", "Black", "White", "Yellow"]},
        },
        "expiryDate": {
            "id": "expiryDate",
            "label": "Expiry Date",
            "renderer": "date",
            "visibleWhen": _when("category", "food"),
            "props": {"minDate": date.today()},
            "rules": {"required": "Expiry date is required for food items"},
        },
    }
    return {
        "id": "product-form",
        "meta": {"title": "Add Product", "subtitle": "Fill in product details"},
        "fields": {
            "productName": {
                "id": "productName",
                "label": "Product Name",
                "renderer": "text",
                "rules": {"required": "Product name is required"},
            },
            "category": {
                "id": "category",
                "label": "Category",
                "renderer": "select",
                "props": {
                    "data": [
                        {"label": "Electronics", "value": "electronics"},
                        {"label": "Clothing", "value": "clothing"},
                        {"label": "Food", "value": "food"},
                        {"label": "Books", "value": "books"},
                    ]
                },
                "rules": {"required": "Category is required"},
            },
            **category_fields,
            "price": {
                "id": "price",
                "label": "Price (KES)",
                "renderer": "number",
                "props": {"min": 0, "precision": 2, "step": 0.01},
                "rules": {
                    "required": "Price is required",
                    "min": {"value": 0, "message": "Price must be positive"},
                },
            },
            "discountApplied": {
                "id": "discountApplied",
                "label": "Apply Discount",
                "renderer": "switch",
                "defaultValue": False,
            },
            "discountPercentage": {
                "id": "discountPercentage",
                "label": "Discount Percentage",
                "renderer": "number",
                "visibleWhen": _when("discountApplied", True),
                "props": {"min": 0, "max": 100, "suffix": "%"},
                "rules": {
                    "required": "Discount percentage is required",
                    "min": {"value": 1, "message": "Discount must be at least 1%"},
                    "max": {"value": 90, "message": "Discount cannot exceed 90%"},
                },
            },
            "stock": {
                "id": "stock",
                "label": "Stock Quantity",
                "renderer": "number",
                "props": {"min": 0},
                "rules": {
                    "required": "Stock quantity is required",
                    "min": {"value": 0, "message": "Stock cannot be negative"},
                },
            },
            "description": {
                "id": "description",
                "label": "Description",
                "renderer": "textarea",
                "props": {"minRows": 4},
            },
            "featured": {
                "id": "featured",
                "label": "Feature this product",
                "renderer": "checkbox",
                "defaultValue": False,
            },
        },
        "layout": [
            {
                "kind": "section",
                "title": "Basic Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [_field("productName"), _field("category")],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Category-Specific Details",
                "withDivider": True,
                "collapsible": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [_field(field_id) for field_id in category_fields],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Pricing & Inventory",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 3,
                        "spacing": "md",
                        "children": [
                            _field("price"),
                            _field("stock"),
                            _field("discountApplied"),
                            _field("discountPercentage", col_span=2),
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Additional Information",
                "withDivider": False,
                "children": [
                    {
                        "kind": "stack",
                        "spacing": "md",
                        "children": [_field("description"), _field("featured")],
                    }
                ],
            },
        ],
    }


def address_form() -> dict[str, Any]:
    """Shipping address whose region fields depend on the country."""
    return {
        "id": "address-form",
        "meta": {"title": "Shipping Address", "subtitle": "Where should we send your order?"},
        "fields": {
            "fullName": {
                "id": "fullName",
                "label": "Full Name",
                "renderer": "text",
                "rules": {"required": "Full name is required"},
            },
            "country": {
                "id": "country",
                "label": "Country",
                "renderer": "select",
                "props": {
                    "data": [
                        {"label": "Kenya", "value": "KE"},
                        {"label": "United States", "value": "US"},
                        {"label": "United Kingdom", "value": "UK"},
                        {"label": "Canada", "value": "CA"},
                    ],
                    "searchable": True,
                },
                "rules": {"required": "Country is required"},
            },
            "county": {
                "id": "county",
                "label": "County",
                "renderer": "select",
                "visibleWhen": _when("country", "KE"),
                "props": {
                    "data": ["Nairobi", "Mombasa", "Kisumu", "Nakuru", "Eldoret"],
                    "searchable": True,
                },
                "rules": {"required": "County is required"},
            },
            "state": {
                "id": "state",
                "label": "State",
                "renderer": "select",
                "visibleWhen": _when("country", "US"),
                "props": {
                    "data": ["California", "Texas", "New York", "Florida", "Illinois"],
                    "searchable": True,
                },
                "rules": {"required": "State is required"},
            },
            "postcode": {
                "id": "postcode",
                "label": "Postcode",
                "renderer": "text",
                "visibleWhen": _when("country", "UK"),
                "rules": {
                    "required": "Postcode is required",
                    "pattern": {
                        "value": re.compile(r"^[A-Z]{1,2}\d[A-Z\d]?\s?\d[A-Z]{2}$", re.IGNORECASE),
                        "message": "Invalid UK postcode",
                    },
                },
            },
            "addressLine1": {
                "id": "addressLine1",
                "label": "Address Line 1",
                "renderer": "text",
                "placeholder": "Street address",
                "rules": {"required": "Address is required"},
            },
            "addressLine2": {
                "id": "addressLine2",
                "label": "Address Line 2",
                "renderer": "text",
                "placeholder": "Apartment, suite, etc. (optional)",
            },
            "city": {
                "id": "city",
                "label": "City",
                "renderer": "text",
                "rules": {"required": "City is required"},
            },
            "zipCode": {
                "id": "zipCode",
                "label": "ZIP / Postal Code",
                "renderer": "text",
                "visibleWhen": {"field": "country", "op": "in", "value": ["US", "CA"]},
                "rules": {"required": "ZIP code is required"},
            },
            "phone": {
                "id": "phone",
                "label": "Phone Number",
                "renderer": "text",
                "inputType": "tel",
                "rules": {"required": "Phone number is required"},
            },
            "deliveryInstructions": {
                "id": "deliveryInstructions",
                "label": "Delivery Instructions",
                "renderer": "textarea",
                "placeholder": "Any special delivery instructions?",
                "props": {"minRows": 2},
            },
            "setAsDefault": {
                "id": "setAsDefault",
                "label": "Set as default shipping address",
                "renderer": "checkbox",
                "defaultValue": False,
            },
        },
        "layout": [
            {
                "kind": "stack",
                "spacing": "lg",
                "children": [
                    _field("fullName"),
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            _field("country"),
                            _field("county"),
                            _field("state"),
                            _field("postcode"),
                        ],
                    },
                    _field("addressLine1"),
                    _field("addressLine2"),
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [_field("city"), _field("zipCode")],
                    },
                    _field("phone"),
                    _field("deliveryInstructions"),
                    _field("setAsDefault"),
                ],
            }
        ],
    }


def _at_least_three(value: Any, values: Any) -> bool | str:
    return (bool(value) and len(value) >= 3) or "Select at least 3 skills"


def job_application_form() -> dict[str, Any]:
    """Job application with employment-dependent fields and a skills picker."""
    return {
        "id": "job-application",
        "meta": {"title": "Job Application", "subtitle": "Software Engineer Position"},
        "fields": {
            "firstName": {"id": "firstName", "label": "First Name", "renderer": "text", "rules": {"required": "Required"}},
            "lastName": {"id": "lastName", "label": "Last Name", "renderer": "text", "rules": {"required": "Required"}},
            "email": {
                "id": "email",
                "label": "Email",
                "renderer": "text",
                "inputType": "email",
                "rules": {
                    "required": "Required",
                    "pattern": {"value": EMAIL_PATTERN, "message": "Invalid email"},
                },
            },
            "phone": {"id": "phone", "label": "Phone", "renderer": "text", "inputType": "tel", "rules": {"required": "Required"}},
            "experienceLevel": {
                "id": "experienceLevel",
                "label": "Experience Level",
                "renderer": "select",
                "props": {
                    "data": [
                        {"label": "Entry Level (0-2 years)", "value": "entry"},
                        {"label": "Mid Level (3-5 years)", "value": "mid"},
                        {"label": "Senior (6-10 years)", "value": "senior"},
                        {"label": "Lead (10+ years)", "value": "lead"},
                    ]
                },
                "rules": {"required": "Required"},
            },
            "yearsOfExperience": {
                "id": "yearsOfExperience",
                "label": "Years of Experience",
                "renderer": "number",
                "props": {"min": 0, "max": 50},
                "rules": {"required": "Required", "min": {"value": 0, "message": "Cannot be negative"}},
            },
            "currentlyEmployed": {
                "id": "currentlyEmployed",
                "label": "Currently Employed",
                "renderer": "radio",
                "props": {"options": YES_NO},
                "rules": {"required": "Required"},
            },
            "currentCompany": {
                "id": "currentCompany",
                "label": "Current Company",
                "renderer": "text",
                "visibleWhen": _when("currentlyEmployed", "yes"),
                "rules": {"required": "Required"},
            },
            "currentPosition": {
                "id": "currentPosition",
                "label": "Current Position",
                "renderer": "text",
                "visibleWhen": _when("currentlyEmployed", "yes"),
            },
            "noticePeriod": {
                "id": "noticePeriod",
                "label": "Notice Period",
                "renderer": "select",
                "visibleWhen": _when("currentlyEmployed", "yes"),
                "props": {
                    "data": [
                        {"label": "Immediate", "value": "immediate"},
                        {"label": "2 weeks", "value": "2weeks"},
                        {"label": "1 month", "value": "1month"},
                        {"label": "2 months", "value": "2months"},
                        {"label": "3 months", "value": "3months"},
                    ]
                },
            },
            "primarySkills": {
                "id": "primarySkills",
                "label": "Primary Skills",
                "renderer": "multiselect",
                "props": {
                    "data": [
                        "JavaScript", "TypeScript", "React", "Node.js",
                        "Python", "Java", "Go", "Rust", "C++",
                        "SQL", "MongoDB", "PostgreSQL", "Redis",
                        "AWS", "Azure", "Docker", "Kubernetes",
                    ],
                    "searchable": True,
                    "maxValues": 8,
                },
                "rules": {"required": "Select at least 3 skills", "validate": _at_least_three},
            },
            "resume": {
                "id": "resume",
                "label": "Resume/CV",
                "renderer": "file",
                "props": {"accept": ".pdf,.doc,.docx", "maxSize": 5 * 1024 * 1024},
                "rules": {"required": "Resume is required"},
            },
            "coverLetter": {
                "id": "coverLetter",
                "label": "Cover Letter",
                "renderer": "textarea",
                "placeholder": "Tell us why you're a great fit...",
                "props": {"minRows": 6},
                "rules": {
                    "required": "Cover letter is required",
                    "minLength": {"value": 100, "message": "At least 100 characters"},
                },
            },
            "portfolio": {
                "id": "portfolio",
                "label": "Portfolio URL",
                "renderer": "text",
                "inputType": "url",
                "placeholder": "https://yourportfolio.com",
                "rules": {"pattern": {"value": r"^https?://.+", "message": "Must be a valid URL"}},
            },
            "linkedIn": {
                "id": "linkedIn",
                "label": "LinkedIn Profile",
                "renderer": "text",
                "inputType": "url",
                "placeholder": "https://linkedin.com/in/yourprofile",
            },
            "github": {
                "id": "github",
                "label": "GitHub Profile",
                "renderer": "text",
                "inputType": "url",
                "placeholder": "https://github.com/yourusername",
            },
            "expectedSalary": {
                "id": "expectedSalary",
                "label": "Expected Salary (Annual, KES)",
                "renderer": "number",
                "props": {"min": 0, "step": 100000, "thousandsSeparator": ","},
            },
            "willingToRelocate": {
                "id": "willingToRelocate",
                "label": "Willing to Relocate",
                "renderer": "switch",
                "defaultValue": False,
            },
            "remoteWork": {
                "id": "remoteWork",
                "label": "Remote Work Preference",
                "renderer": "select",
                "props": {
                    "data": [
                        {"label": "Fully Remote", "value": "remote"},
                        {"label": "Hybrid", "value": "hybrid"},
                        {"label": "On-site", "value": "onsite"},
                        {"label": "Flexible", "value": "flexible"},
                    ]
                },
            },
            "legallyAuthorized": {
                "id": "legallyAuthorized",
                "label": "I am legally authorized to work in Kenya",
                "renderer": "checkbox",
                "rules": {"required": "You must confirm authorization to work"},
            },
            "agreeToTerms": {
                "id": "agreeToTerms",
                "label": "I agree to the terms and conditions",
                "renderer": "checkbox",
                "rules": {"required": "You must agree to terms"},
            },
        },
        "layout": [
            {
                "kind": "section",
                "title": "Personal Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [_field("firstName"), _field("lastName"), _field("email"), _field("phone")],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Professional Experience",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            _field("experienceLevel"),
                            _field("yearsOfExperience"),
                            _field("currentlyEmployed", col_span=2),
                        ],
                    },
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            _field("currentCompany"),
                            _field("currentPosition"),
                            _field("noticePeriod", col_span=2),
                        ],
                    },
                ],
            },
            {
                "kind": "section",
                "title": "Skills & Qualifications",
                "withDivider": True,
                "children": [{"kind": "stack", "spacing": "md", "children": [_field("primarySkills")]}],
            },
            {
                "kind": "section",
                "title": "Application Materials",
                "withDivider": True,
                "children": [
                    {
                        "kind": "stack",
                        "spacing": "md",
                        "children": [
                            _field("resume"),
                            _field("coverLetter"),
                            {
                                "kind": "grid",
                                "cols": 3,
                                "spacing": "md",
                                "children": [_field("portfolio"), _field("linkedIn"), _field("github")],
                            },
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Work Preferences",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 3,
                        "spacing": "md",
                        "children": [_field("expectedSalary"), _field("remoteWork"), _field("willingToRelocate")],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Legal & Confirmation",
                "withDivider": False,
                "children": [
                    {
                        "kind": "stack",
                        "spacing": "sm",
                        "children": [_field("legallyAuthorized"), _field("agreeToTerms")],
                    }
                ],
            },
        ],
    }


def insurance_quote_form() -> dict[str, Any]:
    """Quote request where details depend on the insurance type and on each other."""
    auto = _when("insuranceType", "auto")
    home = _when("insuranceType", "home")
    life = _when("insuranceType", "life")
    health = _when("insuranceType", "health")
    return {
        "id": "insurance-quote",
        "meta": {
            "title": "Get Insurance Quote",
            "subtitle": "Fill in your details for a personalized quote",
        },
        "fields": {
            "insuranceType": {
                "id": "insuranceType",
                "label": "Insurance Type",
                "renderer": "select",
                "props": {
                    "data": [
                        {"label": "Auto Insurance", "value": "auto"},
                        {"label": "Home Insurance", "value": "home"},
                        {"label": "Life Insurance", "value": "life"},
                        {"label": "Health Insurance", "value": "health"},
                    ]
                },
                "rules": {"required": "Required"},
            },
            "vehicleType": {
                "id": "vehicleType",
                "label": "Vehicle Type",
                "renderer": "select",
                "visibleWhen": auto,
                "props": {"data": ["Car", "Motorcycle", "Truck", "SUV"]},
                "rules": {"required": "Required"},
            },
            "vehicleAge": {
                "id": "vehicleAge",
                "label": "Vehicle Age (years)",
                "renderer": "number",
                "visibleWhen": auto,
                "props": {"min": 0, "max": 50},
            },
            "hasAccidents": {
                "id": "hasAccidents",
                "label": "Any accidents in last 3 years?",
                "renderer": "radio",
                "visibleWhen": auto,
                "props": {"options": YES_NO},
            },
            "accidentCount": {
                "id": "accidentCount",
                "label": "Number of Accidents",
                "renderer": "number",
                "visibleWhen": [auto, _when("hasAccidents", "yes")],
                "props": {"min": 1, "max": 10},
                "rules": {"required": "Required"},
            },
            "propertyType": {
                "id": "propertyType",
                "label": "Property Type",
                "renderer": "select",
                "visibleWhen": home,
                "props": {"data": ["House", "Apartment", "Condo", "Townhouse"]},
                "rules": {"required": "Required"},
            },
            "propertyValue": {
                "id": "propertyValue",
                "label": "Property Value (KES)",
                "renderer": "number",
                "visibleWhen": home,
                "props": {"min": 0, "step": 100000, "thousandsSeparator": ","},
                "rules": {"required": "Required"},
            },
            "hasSecuritySystem": {
                "id": "hasSecuritySystem",
                "label": "Has Security System",
                "renderer": "switch",
                "visibleWhen": home,
                "defaultValue": False,
            },
            "age": {
                "id": "age",
                "label": "Age",
                "renderer": "number",
                "visibleWhen": life,
                "props": {"min": 18, "max": 80},
                "rules": {
                    "required": "Required",
                    "min": {"value": 18, "message": "Must be 18 or older"},
                    "max": {"value": 80, "message": "Maximum age is 80"},
                },
            },
            "smoker": {
                "id": "smoker",
                "label": "Do you smoke?",
                "renderer": "radio",
                "visibleWhen": life,
                "props": {"options": YES_NO},
                "rules": {"required": "Required"},
            },
            "coverageAmount": {
                "id": "coverageAmount",
                "label": "Coverage Amount (KES)",
                "renderer": "select",
                "visibleWhen": life,
                "props": {
                    "data": [
                        {"label": "1,000,000", "value": 1000000},
                        {"label": "2,000,000", "value": 2000000},
                        {"label": "5,000,000", "value": 5000000},
                        {"label": "10,000,000", "value": 10000000},
                    ]
                },
                "rules": {"required": "Required"},
            },
            "familySize": {
                "id": "familySize",
                "label": "Number of People to Cover",
                "renderer": "number",
                "visibleWhen": health,
                "props": {"min": 1, "max": 10},
                "rules": {"required": "Required"},
            },
            "preExistingConditions": {
                "id": "preExistingConditions",
                "label": "Any pre-existing conditions?",
                "renderer": "radio",
                "visibleWhen": health,
                "props": {"options": YES_NO},
                "rules": {"required": "Required"},
            },
            "conditionDetails": {
                "id": "conditionDetails",
                "label": "Please specify conditions",
                "renderer": "textarea",
                "visibleWhen": [health, _when("preExistingConditions", "yes")],
                "props": {"minRows": 3},
                "rules": {"required": "Required"},
            },
            "fullName": {"id": "fullName", "label": "Full Name", "renderer": "text", "rules": {"required": "Required"}},
            "email": {
                "id": "email",
                "label": "Email",
                "renderer": "text",
                "inputType": "email",
                "rules": {
                    "required": "Required",
                    "pattern": {"value": EMAIL_PATTERN, "message": "Invalid email"},
                },
            },
            "phone": {"id": "phone", "label": "Phone", "renderer": "text", "inputType": "tel", "rules": {"required": "Required"}},
        },
        "layout": [
            {
                "kind": "section",
                "title": "Insurance Type",
                "withDivider": True,
                "children": [_field("insuranceType")],
            },
            {
                "kind": "section",
                "title": "Details",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 2,
                        "spacing": "md",
                        "children": [
                            # Auto
                            _field("vehicleType"),
                            _field("vehicleAge"),
                            _field("hasAccidents", col_span=2),
                            _field("accidentCount"),
                            # Home
                            _field("propertyType"),
                            _field("propertyValue"),
                            _field("hasSecuritySystem", col_span=2),
                            # Life
                            _field("age"),
                            _field("smoker"),
                            _field("coverageAmount", col_span=2),
                            # Health
                            _field("familySize"),
                            _field("preExistingConditions"),
                            _field("conditionDetails", col_span=2),
                        ],
                    }
                ],
            },
            {
                "kind": "section",
                "title": "Contact Information",
                "withDivider": True,
                "children": [
                    {
                        "kind": "grid",
                        "cols": 3,
                        "spacing": "md",
                        "children": [_field("fullName"), _field("email"), _field("phone")],
                    }
                ],
            },
        ],
    }


EXAMPLE_SCHEMAS: dict[str, Callable[[], dict[str, Any]]] = {
    "contact-form": contact_form,
    "user-registration": registration_form,
    "agent-update": agent_update_form,
    "product-form": product_form,
    "address-form": address_form,
    "job-application": job_application_form,
    "insurance-quote": insurance_quote_form,
}


def list_example_schemas() -> list[str]:
    return list(EXAMPLE_SCHEMAS)


def load_example_schema(name: str, strict: bool = True) -> FormSchema:
    """Build and check one of the example schemas by id."""
    try:
        builder = EXAMPLE_SCHEMAS[name]
    except KeyError:
        raise KeyError(
            f"Unknown example schema '{name}'. Available: {', '.join(EXAMPLE_SCHEMAS)}"
        ) from None
    return load_schema(builder(), strict=strict)
