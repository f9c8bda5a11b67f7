"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""
MOCK_DATA = {
    "get-function": {
        "example-function": {
            "ResponseMetadata": {
                "HTTPStatusCode": 200,
                "HTTPHeaders": {},
                "RetryAttempts": 0,
            },
            "Configuration": {
                "FunctionName": "example-function",
                "FunctionArn": "arn:aws:lambda:us-east-1:123456789012:function:example-function",
                "Runtime": "python3.9",
                "Role": "arn:aws:iam::123456789012:role/example-function-role",
                "Handler": "index.lambda_handler",
                "CodeSize": 284,
                "Timeout": 3,
                "MemorySize": 128,
                "PackageType": "Zip",
                "State": "Active",
            },
            "Code": {
                "RepositoryType": "S3",
                "Location": "https://awslambda-us-east-1-tasks.s3.us-east-1.amazonaws.com/snapshots/123456789012/example-function",
            },
        },
    },
}
