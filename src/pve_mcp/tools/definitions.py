"""
Tool descriptions and shared parameter schemas for the Proxmox operations.
"""

NODE = {"type": "string", "description": "Node name"}
VMID = {"type": "number", "description": "VM ID"}
CTID = {"type": "number", "description": "Container ID"}
SNAPNAME = {"type": "string", "description": "Snapshot name"}

BACKUP_MODES = ["snapshot", "suspend", "stop"]
BACKUP_COMPRESSION = ["0", "gzip", "lzo", "zstd"]

# Cluster & node tool descriptions
GET_CLUSTER_STATUS_DESC = "Get Proxmox cluster status and health"
LIST_NODES_DESC = "List all nodes in the Proxmox cluster"
GET_NODE_STATUS_DESC = "Get detailed status of a specific node"
GET_NODE_RESOURCES_DESC = """Get CPU, memory, and storage usage for a node.

Example:
{"cpu": {"usage": "3.12%", "cores": 8}, "memory": {"used": "7.80 GB", "total": "31.26 GB"}, "uptime": "12d 4h 31m"}"""

# VM tool descriptions
LIST_VMS_DESC = "List all VMs across the cluster or on a specific node"
GET_VM_STATUS_DESC = "Get detailed status of a specific VM"
GET_VM_CONFIG_DESC = "Get configuration of a specific VM"
START_VM_DESC = "Start a VM"
STOP_VM_DESC = "Stop a VM (graceful shutdown unless force is set)"
REBOOT_VM_DESC = "Reboot a VM"
SUSPEND_VM_DESC = "Suspend a VM"
RESUME_VM_DESC = "Resume a suspended VM"
CLONE_VM_DESC = "Clone a VM"
DELETE_VM_DESC = """Delete a VM (use with caution!)

⚠️ WARNING: This permanently removes the VM configuration and its disks."""
MIGRATE_VM_DESC = "Migrate VM to another node"

# Container tool descriptions
LIST_CONTAINERS_DESC = "List all LXC containers"
GET_CONTAINER_STATUS_DESC = "Get status of a container"
START_CONTAINER_DESC = "Start a container"
STOP_CONTAINER_DESC = "Stop a container"

# Storage & backup tool descriptions
LIST_STORAGE_DESC = "List all storage pools"
GET_STORAGE_CONTENT_DESC = "List content of a storage pool"
LIST_BACKUPS_DESC = "List backups for a VM or container"
CREATE_BACKUP_DESC = "Create a backup of a VM or container"

# Snapshot tool descriptions
LIST_SNAPSHOTS_DESC = "List snapshots of a VM"
CREATE_SNAPSHOT_DESC = "Create a snapshot of a VM"
ROLLBACK_SNAPSHOT_DESC = "Rollback VM to a snapshot"
DELETE_SNAPSHOT_DESC = "Delete a snapshot"

# Task & network tool descriptions
LIST_TASKS_DESC = "List recent tasks"
GET_TASK_STATUS_DESC = """Get status of a task.

Mutating operations only return a task UPID; use this to follow up on them."""
LIST_NETWORKS_DESC = "List network interfaces on a node"

# Terraform tool descriptions
GENERATE_TERRAFORM_DESC = "Generate Terraform configuration for a VM"
GENERATE_TERRAFORM_PROVIDER_DESC = "Generate Terraform provider configuration for this Proxmox cluster"
