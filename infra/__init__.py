"""AWS CDK application for the hello-world serverless stack."""
