DEFAULT_PRD_TEMPLATE = """# Product Requirements Document: [Product Name]

## Executive Summary
Brief overview of the product and its purpose.

## Problem Statement
- What problem are we solving?
- Who experiences this problem?
- How significant is this problem?

## Objectives & Success Metrics
### Primary Goals
- Goal 1
- Goal 2
- Goal 3

### Key Metrics
- Metric 1: [Target]
- Metric 2: [Target]
- Metric 3: [Target]

## User Stories & Requirements
### User Personas
- Persona 1: [Description]
- Persona 2: [Description]

### User Stories
- As a [user type], I want [functionality] so that [benefit]
- As a [user type], I want [functionality] so that [benefit]

## Technical Requirements
### Functional Requirements
1. Requirement 1
2. Requirement 2
3. Requirement 3

### Non-Functional Requirements
- Performance: [Requirements]
- Security: [Requirements]
- Scalability: [Requirements]

## Implementation Timeline
### Phase 1: [Timeframe]
- Milestone 1
- Milestone 2

### Phase 2: [Timeframe]
- Milestone 3
- Milestone 4

## Risks & Dependencies
- Risk 1: [Mitigation strategy]
- Dependency 1: [Details]

## Appendix
Additional context, research, or supporting materials."""


DEFAULT_SPEC_TEMPLATE = """# Technical Specification: [Feature Name]

## Overview
High-level description of the technical solution.

## Architecture
### System Architecture
- Component 1: [Description]
- Component 2: [Description]
- Component 3: [Description]

### Data Flow
1. Step 1: [Description]
2. Step 2: [Description]
3. Step 3: [Description]

## API Design
### Endpoints
```
GET /api/endpoint1
POST /api/endpoint2
PUT /api/endpoint3
DELETE /api/endpoint4
```

### Data Models
- Model 1: [Fields]
- Model 2: [Fields]

## Database Schema
### Tables
- Table 1: [Description and fields]
- Table 2: [Description and fields]

### Relationships
- Relationship 1: [Description]
- Relationship 2: [Description]

## Security Considerations
- Authentication: [Strategy]
- Authorization: [Strategy]
- Data Protection: [Strategy]

## Performance Requirements
- Response Time: [Target]
- Throughput: [Target]
- Concurrent Users: [Target]

## Testing Strategy
### Unit Tests
- Test category 1
- Test category 2

### Integration Tests
- Integration scenario 1
- Integration scenario 2

### End-to-End Tests
- User journey 1
- User journey 2

## Deployment Plan
### Infrastructure
- Environment 1: [Configuration]
- Environment 2: [Configuration]

### Rollout Strategy
1. Phase 1: [Details]
2. Phase 2: [Details]
3. Phase 3: [Details]

## Monitoring & Observability
- Metrics to track
- Alerts to configure
- Logging strategy"""
